"""
Structural validation for flow objects.

Provides the FO1..FO5 rules, the error code vocabulary, and the error queue.
"""

from .error_queue import ElementErrorSink, ErrorQueue
from .errors import FlowObjectErrorCode, ValidationError
from .protocols import Connectivity, ErrorSink
from .rules import (
    ValidationRule,
    assert_incoming_sequence_flows,
    assert_name,
    assert_no_incoming_sequence_flows,
    assert_no_outgoing_sequence_flows,
    assert_one_outgoing_sequence_flow,
    assert_outgoing_sequence_flows,
)

__all__ = [
    "Connectivity",
    "ElementErrorSink",
    "ErrorQueue",
    "ErrorSink",
    "FlowObjectErrorCode",
    "ValidationError",
    "ValidationRule",
    "assert_incoming_sequence_flows",
    "assert_name",
    "assert_no_incoming_sequence_flows",
    "assert_no_outgoing_sequence_flows",
    "assert_one_outgoing_sequence_flow",
    "assert_outgoing_sequence_flows",
]

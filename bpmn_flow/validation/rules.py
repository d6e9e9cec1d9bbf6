"""
Structural validation rules shared by every flow object.

Each rule inspects one flow object's name or connectivity and appends at most
one error to the sink. Rules never raise on a finding and never stop the
caller from running the remaining rules, so a whole process definition can be
checked in a single pass. Concrete kinds pick the subset they need; see
``bpmn_flow.models.registry``.
"""

from typing import TYPE_CHECKING, Callable

from bpmn_flow.validation.errors import FlowObjectErrorCode
from bpmn_flow.validation.protocols import Connectivity, ErrorSink

if TYPE_CHECKING:
    from bpmn_flow.models.flow_objects import FlowObject

ValidationRule = Callable[["FlowObject", Connectivity, ErrorSink], None]


def _describe(flow_object: "FlowObject") -> str:
    return f"The {flow_object.type} '{flow_object.name}'"


def _suffix(flow_object: "FlowObject") -> str:
    return f"BPMN id='{flow_object.id}'."


def assert_name(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO1 when the name is empty or whitespace only."""
    assert flow_object is not None, "flow_object is required"
    if flow_object.name.strip() == "":
        error_queue.add_error(
            FlowObjectErrorCode.MISSING_NAME.value,
            f"Found a {flow_object.type} flow object having no name. {_suffix(flow_object)}",
        )


def assert_outgoing_sequence_flows(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO2 when there is no outgoing sequence flow."""
    assert flow_object is not None, "flow_object is required"
    if not connectivity.has_outgoing_sequence_flows(flow_object):
        error_queue.add_error(
            FlowObjectErrorCode.MISSING_OUTGOING.value,
            f"{_describe(flow_object)} must have at least one outgoing sequence flow. "
            f"{_suffix(flow_object)}",
        )


def assert_one_outgoing_sequence_flow(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO3 unless there is exactly one outgoing sequence flow."""
    assert flow_object is not None, "flow_object is required"
    if len(connectivity.get_outgoing_sequence_flows(flow_object)) != 1:
        error_queue.add_error(
            FlowObjectErrorCode.NOT_ONE_OUTGOING.value,
            f"{_describe(flow_object)} must have exactly one outgoing sequence flow. "
            f"{_suffix(flow_object)}",
        )


def assert_no_outgoing_sequence_flows(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO4 when any outgoing sequence flow exists."""
    assert flow_object is not None, "flow_object is required"
    if connectivity.has_outgoing_sequence_flows(flow_object):
        error_queue.add_error(
            FlowObjectErrorCode.UNEXPECTED_OUTGOING.value,
            f"{_describe(flow_object)} must not have outgoing sequence flows. "
            f"{_suffix(flow_object)}",
        )


def assert_incoming_sequence_flows(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO5 when there is no incoming sequence flow."""
    assert flow_object is not None, "flow_object is required"
    if not connectivity.has_incoming_sequence_flows(flow_object):
        error_queue.add_error(
            FlowObjectErrorCode.MISSING_INCOMING.value,
            f"{_describe(flow_object)} must have at least one incoming sequence flow. "
            f"{_suffix(flow_object)}",
        )


def assert_no_incoming_sequence_flows(
    flow_object: "FlowObject", connectivity: Connectivity, error_queue: ErrorSink
) -> None:
    """Report FO5 when any incoming sequence flow exists."""
    assert flow_object is not None, "flow_object is required"
    if connectivity.has_incoming_sequence_flows(flow_object):
        error_queue.add_error(
            FlowObjectErrorCode.UNEXPECTED_INCOMING.value,
            f"{_describe(flow_object)} must not have incoming sequence flows. "
            f"{_suffix(flow_object)}",
        )


__all__ = [
    "ValidationRule",
    "assert_name",
    "assert_outgoing_sequence_flows",
    "assert_one_outgoing_sequence_flow",
    "assert_no_outgoing_sequence_flows",
    "assert_incoming_sequence_flows",
    "assert_no_incoming_sequence_flows",
]

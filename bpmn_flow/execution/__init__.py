"""Execution-side collaborators: the context protocol, forwarders, and process instances."""

from .forwarding import forward_to_all_outgoing
from .protocols import ExecutionContext, TokenForwarder

__all__ = [
    "ExecutionContext",
    "TokenForwarder",
    "forward_to_all_outgoing",
]

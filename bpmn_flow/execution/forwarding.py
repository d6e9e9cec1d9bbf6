"""
Token forwarding behaviors.

A forwarder decides which outgoing sequence flows receive a token when a flow
object is left. Node kinds pick a forwarder at construction time; kinds with
no specialized control flow use ``forward_to_all_outgoing``.
"""

import logging
from typing import TYPE_CHECKING, Any

from bpmn_flow.execution.protocols import ExecutionContext

if TYPE_CHECKING:
    from bpmn_flow.models.flow_objects import FlowObject

logger = logging.getLogger(__name__)


def forward_to_all_outgoing(flow_object: "FlowObject", context: ExecutionContext, data: Any) -> None:
    """Emit one token carrying ``data`` along every outgoing sequence flow.

    A flow object without outgoing flows emits nothing. That is a structural
    defect caught by validation, not a runtime fault.
    """
    outgoing_sequence_flows = context.get_outgoing_sequence_flows(flow_object)
    if not outgoing_sequence_flows:
        logger.debug(f"{flow_object.type} '{flow_object.id}' has no outgoing sequence flows")
    for sequence_flow in outgoing_sequence_flows:
        context.emit_token_along(sequence_flow, data)


__all__ = ["forward_to_all_outgoing"]

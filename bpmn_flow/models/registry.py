"""
Flow object kind registry.

Maps each BPMN element type to the behavior its flow objects are built with:
a token forwarder and the validation rules that fit the kind's semantics.
Kinds are variants selected here at construction time, not subclasses.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Dict, Tuple, Union

from bpmn_flow.execution.forwarding import forward_to_all_outgoing
from bpmn_flow.execution.protocols import TokenForwarder
from bpmn_flow.models.flow_objects import BPMNElementType, FlowObject
from bpmn_flow.validation.rules import (
    ValidationRule,
    assert_incoming_sequence_flows,
    assert_name,
    assert_no_incoming_sequence_flows,
    assert_no_outgoing_sequence_flows,
    assert_one_outgoing_sequence_flow,
    assert_outgoing_sequence_flows,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FlowObjectSpec:
    """Behavior assigned to flow objects of one kind."""

    forwarder: TokenForwarder = forward_to_all_outgoing
    rules: Tuple[ValidationRule, ...] = ()


ACTIVITY_RULES = (assert_name, assert_incoming_sequence_flows, assert_outgoing_sequence_flows)
GATEWAY_RULES = (assert_incoming_sequence_flows, assert_outgoing_sequence_flows)

DEFAULT_SPEC = FlowObjectSpec()

_registry: Dict[str, FlowObjectSpec] = {
    BPMNElementType.START_EVENT.value: FlowObjectSpec(
        rules=(assert_name, assert_no_incoming_sequence_flows, assert_one_outgoing_sequence_flow)
    ),
    BPMNElementType.END_EVENT.value: FlowObjectSpec(
        rules=(assert_name, assert_incoming_sequence_flows, assert_no_outgoing_sequence_flows)
    ),
    BPMNElementType.INTERMEDIATE_CATCH_EVENT.value: FlowObjectSpec(
        rules=(assert_name, assert_incoming_sequence_flows, assert_one_outgoing_sequence_flow)
    ),
    BPMNElementType.INTERMEDIATE_THROW_EVENT.value: FlowObjectSpec(
        rules=(assert_name, assert_incoming_sequence_flows, assert_one_outgoing_sequence_flow)
    ),
    BPMNElementType.BOUNDARY_EVENT.value: FlowObjectSpec(
        rules=(assert_name, assert_no_incoming_sequence_flows, assert_one_outgoing_sequence_flow)
    ),
}

for _activity in (
    BPMNElementType.TASK,
    BPMNElementType.SERVICE_TASK,
    BPMNElementType.USER_TASK,
    BPMNElementType.MANUAL_TASK,
    BPMNElementType.SCRIPT_TASK,
    BPMNElementType.SEND_TASK,
    BPMNElementType.RECEIVE_TASK,
    BPMNElementType.BUSINESS_RULE_TASK,
    BPMNElementType.SUBPROCESS,
    BPMNElementType.CALL_ACTIVITY,
):
    _registry[_activity.value] = FlowObjectSpec(rules=ACTIVITY_RULES)

for _gateway in (
    BPMNElementType.EXCLUSIVE_GATEWAY,
    BPMNElementType.INCLUSIVE_GATEWAY,
    BPMNElementType.PARALLEL_GATEWAY,
    BPMNElementType.EVENT_BASED_GATEWAY,
):
    _registry[_gateway.value] = FlowObjectSpec(rules=GATEWAY_RULES)

_registry_lock = threading.Lock()


def _key(element_type: Union[BPMNElementType, str]) -> str:
    return getattr(element_type, "value", element_type)


def register_flow_object_spec(element_type: Union[BPMNElementType, str], spec: FlowObjectSpec) -> None:
    """Register (or replace) the behavior used for a kind."""
    with _registry_lock:
        _registry[_key(element_type)] = spec
    logger.debug(f"Registered flow object spec for '{_key(element_type)}'")


def get_flow_object_spec(element_type: Union[BPMNElementType, str]) -> FlowObjectSpec:
    """Get the behavior for a kind; unknown kinds get the default forwarder and no rules."""
    return _registry.get(_key(element_type), DEFAULT_SPEC)


def is_registered(element_type: Union[BPMNElementType, str]) -> bool:
    return _key(element_type) in _registry


def create_flow_object(
    id: str, name: str, type: Union[BPMNElementType, str], spec: FlowObjectSpec = None
) -> FlowObject:
    """Build a flow object with the behavior registered for its kind.

    Args:
        id: Unique element ID
        name: Element name (may be empty)
        type: Element kind
        spec: Explicit behavior, overriding the registry

    Returns:
        The new, not yet finalized, flow object
    """
    spec = spec or get_flow_object_spec(type)
    return FlowObject(
        id=id,
        name=name,
        type=type,
        forwarder=spec.forwarder,
        validation_rules=spec.rules,
    )


__all__ = [
    "ACTIVITY_RULES",
    "DEFAULT_SPEC",
    "FlowObjectSpec",
    "GATEWAY_RULES",
    "create_flow_object",
    "get_flow_object_spec",
    "is_registered",
    "register_flow_object_spec",
]

"""
Flow Object Domain Model

Pydantic models for the nodes and connections of a BPMN 2.0 process graph:
https://www.omg.org/spec/BPMN/2.0.2/

A flow object is passive definition-time metadata. It knows its identity and
how to forward a token, but owns no graph structure; connectivity is always
asked of a collaborator (a process definition or an execution context).
"""

from enum import Enum
from typing import Any, Callable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from bpmn_flow.exceptions import FlowObjectFinalizedError
from bpmn_flow.execution.forwarding import forward_to_all_outgoing
from bpmn_flow.execution.protocols import ExecutionContext
from bpmn_flow.validation import rules
from bpmn_flow.validation.protocols import Connectivity, ErrorSink


class BPMNElementType(str, Enum):
    """BPMN element types, named after their XML element."""

    PROCESS = "process"
    TASK = "task"
    SERVICE_TASK = "serviceTask"
    USER_TASK = "userTask"
    MANUAL_TASK = "manualTask"
    SCRIPT_TASK = "scriptTask"
    SEND_TASK = "sendTask"
    RECEIVE_TASK = "receiveTask"
    BUSINESS_RULE_TASK = "businessRuleTask"
    SUBPROCESS = "subProcess"
    CALL_ACTIVITY = "callActivity"
    START_EVENT = "startEvent"
    END_EVENT = "endEvent"
    INTERMEDIATE_CATCH_EVENT = "intermediateCatchEvent"
    INTERMEDIATE_THROW_EVENT = "intermediateThrowEvent"
    BOUNDARY_EVENT = "boundaryEvent"
    EXCLUSIVE_GATEWAY = "exclusiveGateway"
    INCLUSIVE_GATEWAY = "inclusiveGateway"
    PARALLEL_GATEWAY = "parallelGateway"
    EVENT_BASED_GATEWAY = "eventBasedGateway"
    SEQUENCE_FLOW = "sequenceFlow"


class SequenceFlow(BaseModel):
    """Sequence Flow (directed control flow between two flow objects)."""

    id: str = Field(..., description="Unique flow ID")
    name: str = Field(default="", description="Flow label")
    source_ref: str = Field(..., description="Source flow object ID")
    target_ref: str = Field(..., description="Target flow object ID")
    condition_expression: Optional[str] = Field(None, description="Guard condition")

    model_config = ConfigDict(frozen=True)


class FlowObject(BaseModel):
    """
    A node of a process graph that has incoming and outgoing sequence flows.

    ``id`` and ``type`` never change. ``name`` may be edited until the object
    is finalized, after which every assignment raises FlowObjectFinalizedError.
    Behavior is composed rather than inherited: ``forwarder`` and
    ``validation_rules`` are chosen when the object is built (usually by
    ``bpmn_flow.models.registry.create_flow_object``).
    """

    id: str = Field(..., frozen=True, description="Unique element ID")
    name: str = Field(default="", description="Element name/label")
    type: str = Field(..., frozen=True, description="Element kind, e.g. 'task'")
    forwarder: Callable[..., None] = Field(
        default=forward_to_all_outgoing, exclude=True, repr=False, description="Token forwarder"
    )
    validation_rules: Tuple[Callable[..., None], ...] = Field(
        default=(), exclude=True, repr=False, description="Rules applied by validate_structure"
    )

    _finalized: bool = PrivateAttr(default=False)

    model_config = ConfigDict(validate_assignment=True)

    @field_validator("type", mode="before")
    @classmethod
    def _coerce_type(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("name", mode="before")
    @classmethod
    def _coerce_name(cls, value: Any) -> Any:
        return "" if value is None else value

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and getattr(self, "_finalized", False):
            raise FlowObjectFinalizedError(
                f"Cannot set '{name}' on finalized {self.type} '{self.id}'"
            )
        super().__setattr__(name, value)

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> None:
        """Make this flow object read-only."""
        self._finalized = True

    def emit_tokens(self, context: ExecutionContext, data: Any = None) -> None:
        """Leave this flow object, emitting tokens as the forwarder decides."""
        self.forwarder(self, context, data)

    def validate_structure(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        """Run this kind's validation rules, reporting every finding to ``error_queue``."""
        for rule in self.validation_rules:
            rule(self, connectivity, error_queue)

    # Individual rules, for kinds composing their own validation

    def assert_name(self, error_queue: ErrorSink) -> None:
        rules.assert_name(self, None, error_queue)

    def assert_outgoing_sequence_flows(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        rules.assert_outgoing_sequence_flows(self, connectivity, error_queue)

    def assert_one_outgoing_sequence_flow(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        rules.assert_one_outgoing_sequence_flow(self, connectivity, error_queue)

    def assert_no_outgoing_sequence_flows(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        rules.assert_no_outgoing_sequence_flows(self, connectivity, error_queue)

    def assert_incoming_sequence_flows(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        rules.assert_incoming_sequence_flows(self, connectivity, error_queue)

    def assert_no_incoming_sequence_flows(self, connectivity: Connectivity, error_queue: ErrorSink) -> None:
        rules.assert_no_incoming_sequence_flows(self, connectivity, error_queue)


__all__ = [
    "BPMNElementType",
    "SequenceFlow",
    "FlowObject",
]

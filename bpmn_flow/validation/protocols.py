"""Collaborator interfaces consumed and produced by the validation rules."""

from typing import TYPE_CHECKING, Any, Protocol, Sequence

if TYPE_CHECKING:
    from bpmn_flow.models.flow_objects import FlowObject


class Connectivity(Protocol):
    """Read-only view of the sequence flows attached to each flow object."""

    def get_outgoing_sequence_flows(self, flow_object: "FlowObject") -> Sequence[Any]:
        ...

    def has_outgoing_sequence_flows(self, flow_object: "FlowObject") -> bool:
        ...

    def get_incoming_sequence_flows(self, flow_object: "FlowObject") -> Sequence[Any]:
        ...

    def has_incoming_sequence_flows(self, flow_object: "FlowObject") -> bool:
        ...


class ErrorSink(Protocol):
    """Append-only collector of validation findings."""

    def add_error(self, code: str, message: str) -> None:
        ...

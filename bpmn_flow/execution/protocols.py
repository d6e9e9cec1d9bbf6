"""Protocol definition for the execution context a flow object emits tokens into."""

from typing import TYPE_CHECKING, Any, Callable, Protocol, Sequence

if TYPE_CHECKING:
    from bpmn_flow.models.flow_objects import FlowObject, SequenceFlow


class ExecutionContext(Protocol):
    """Runtime collaborator that resolves outgoing flows and advances tokens."""

    def get_outgoing_sequence_flows(self, flow_object: "FlowObject") -> Sequence["SequenceFlow"]:
        """
        Resolve the outgoing sequence flows of a flow object.

        Args:
            flow_object: The node currently holding the token

        Returns:
            The outgoing sequence flows, in no particular order
        """
        ...

    def emit_token_along(self, sequence_flow: "SequenceFlow", data: Any) -> None:
        """
        Advance a token along one sequence flow.

        Args:
            sequence_flow: The flow the token travels along
            data: Payload carried by the token
        """
        ...


TokenForwarder = Callable[["FlowObject", ExecutionContext, Any], None]

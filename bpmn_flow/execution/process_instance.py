"""
Process Instance

In-memory execution context over a process definition. It records the tokens
emitted by flow objects; deciding when the receiving nodes run is left to the
caller.
"""

import logging
import threading
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

from bpmn_flow.models.flow_objects import FlowObject, SequenceFlow
from bpmn_flow.models.process_definition import ProcessDefinition

logger = logging.getLogger(__name__)


@dataclass
class Token:
    """A unit of control waiting at a flow object."""

    flow_object_id: str
    sequence_flow_id: str
    data: Any = None
    metadata: Dict[str, Any] = field(default_factory=dict)


class ProcessInstance:
    """A running instance of a process definition."""

    def __init__(self, process_definition: ProcessDefinition, instance_id: Optional[str] = None):
        """Initialize the instance.

        Args:
            process_definition: Definition this instance executes
            instance_id: Optional explicit id, generated when omitted
        """
        self.process_definition = process_definition
        self.instance_id = instance_id or str(uuid4())
        self._tokens: List[Token] = []
        self._lock = threading.Lock()

    def get_outgoing_sequence_flows(self, flow_object: FlowObject) -> Sequence[SequenceFlow]:
        return self.process_definition.get_outgoing_sequence_flows(flow_object)

    def emit_token_along(self, sequence_flow: SequenceFlow, data: Any) -> None:
        """Record a token arriving at the target of ``sequence_flow``."""
        token = Token(
            flow_object_id=sequence_flow.target_ref,
            sequence_flow_id=sequence_flow.id,
            data=data,
        )
        with self._lock:
            self._tokens.append(token)
        logger.debug(
            f"Instance {self.instance_id}: token emitted along '{sequence_flow.id}' "
            f"to '{sequence_flow.target_ref}'"
        )

    def leave(self, flow_object_id: str, data: Any = None) -> None:
        """Let the given flow object emit its outgoing tokens."""
        flow_object = self.process_definition.require_flow_object(flow_object_id)
        flow_object.emit_tokens(self, data)

    @property
    def tokens(self) -> List[Token]:
        """Snapshot of recorded tokens."""
        with self._lock:
            return list(self._tokens)

    def take_tokens(self) -> List[Token]:
        """Remove and return all recorded tokens."""
        with self._lock:
            tokens, self._tokens = self._tokens, []
        return tokens


__all__ = ["Token", "ProcessInstance"]

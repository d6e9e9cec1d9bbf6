"""
Process Definition

The static, finalizable graph of flow objects and sequence flows. It answers
the connectivity queries the validation rules and execution contexts rely on,
using indexes built once per structural change.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel, Field, PrivateAttr

from bpmn_flow.core.observability import record_metric, span
from bpmn_flow.exceptions import (
    DuplicateElementError,
    ProcessDefinitionFinalizedError,
    UnknownElementError,
)
from bpmn_flow.models.flow_objects import BPMNElementType, FlowObject, SequenceFlow
from bpmn_flow.validation.error_queue import ErrorQueue

logger = logging.getLogger(__name__)

FlowObjectRef = Union[FlowObject, str]


class ProcessDefinition(BaseModel):
    """Complete process definition with indexed connectivity."""

    id: str = Field(..., description="Process identifier")
    name: str = Field(default="", description="Process name")
    is_executable: bool = Field(True, description="Whether process is executable")

    # Lists while under construction, tuples once finalized
    flow_objects: Sequence[FlowObject] = Field(default_factory=list, description="All flow objects")
    sequence_flows: Sequence[SequenceFlow] = Field(default_factory=list, description="All sequence flows")

    # Internal indexes for O(1) lookups (not serialized)
    _flow_object_index: Dict[str, FlowObject] = PrivateAttr(default_factory=dict)
    _sequence_flow_index: Dict[str, SequenceFlow] = PrivateAttr(default_factory=dict)
    _outgoing_flows: Dict[str, List[SequenceFlow]] = PrivateAttr(default_factory=dict)
    _incoming_flows: Dict[str, List[SequenceFlow]] = PrivateAttr(default_factory=dict)
    _finalized: bool = PrivateAttr(default=False)

    def __init__(self, **data):
        """Initialize definition and build indexes."""
        super().__init__(**data)
        self._build_indexes()

    def __setattr__(self, name: str, value: Any) -> None:
        if not name.startswith("_") and getattr(self, "_finalized", False):
            raise ProcessDefinitionFinalizedError(
                f"Cannot set '{name}': process definition '{self.id}' is finalized"
            )
        super().__setattr__(name, value)

    def _build_indexes(self) -> None:
        """Build internal indexes for O(1) lookups."""
        self._flow_object_index = {}
        self._sequence_flow_index = {}
        self._outgoing_flows = {}
        self._incoming_flows = {}

        for flow_object in self.flow_objects:
            if flow_object.id in self._flow_object_index:
                raise DuplicateElementError(f"Duplicate flow object id '{flow_object.id}'")
            self._flow_object_index[flow_object.id] = flow_object

        # flow objects are indexed first, so sequence flows see every node id
        for sequence_flow in self.sequence_flows:
            self._index_sequence_flow(sequence_flow)

    def _index_sequence_flow(self, sequence_flow: SequenceFlow) -> None:
        if sequence_flow.id in self._sequence_flow_index:
            raise DuplicateElementError(f"Duplicate sequence flow id '{sequence_flow.id}'")
        if sequence_flow.id in self._flow_object_index:
            raise DuplicateElementError(
                f"Sequence flow id '{sequence_flow.id}' is already used by a flow object"
            )
        self._sequence_flow_index[sequence_flow.id] = sequence_flow
        self._outgoing_flows.setdefault(sequence_flow.source_ref, []).append(sequence_flow)
        self._incoming_flows.setdefault(sequence_flow.target_ref, []).append(sequence_flow)

    @staticmethod
    def _resolve_id(flow_object: FlowObjectRef) -> str:
        return flow_object if isinstance(flow_object, str) else flow_object.id

    # Construction

    def add_flow_object(self, flow_object: FlowObject) -> FlowObject:
        """Add a flow object; only allowed before finalization."""
        self._check_not_finalized()
        if flow_object.id in self._flow_object_index:
            raise DuplicateElementError(f"Duplicate flow object id '{flow_object.id}'")
        if flow_object.id in self._sequence_flow_index:
            raise DuplicateElementError(
                f"Flow object id '{flow_object.id}' is already used by a sequence flow"
            )
        self.flow_objects = [*self.flow_objects, flow_object]
        self._flow_object_index[flow_object.id] = flow_object
        return flow_object

    def add_sequence_flow(self, sequence_flow: SequenceFlow) -> SequenceFlow:
        """Add a sequence flow; only allowed before finalization."""
        self._check_not_finalized()
        self._index_sequence_flow(sequence_flow)
        self.sequence_flows = [*self.sequence_flows, sequence_flow]
        return sequence_flow

    def _check_not_finalized(self) -> None:
        if self._finalized:
            raise ProcessDefinitionFinalizedError(
                f"Process definition '{self.id}' is finalized and cannot be modified"
            )

    @property
    def is_finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> "ProcessDefinition":
        """
        Freeze the definition and every flow object it contains.

        The element lists become tuples and further attribute assignment
        raises ``ProcessDefinitionFinalizedError``.
        """
        for flow_object in self.flow_objects:
            flow_object.finalize()
        self.flow_objects = tuple(self.flow_objects)
        self.sequence_flows = tuple(self.sequence_flows)
        self._finalized = True
        logger.debug(
            f"Finalized process '{self.id}': {len(self.flow_objects)} flow objects, "
            f"{len(self.sequence_flows)} sequence flows"
        )
        return self

    # Lookups

    def get_flow_object(self, flow_object_id: str) -> Optional[FlowObject]:
        """Get flow object by ID - O(1) lookup."""
        return self._flow_object_index.get(flow_object_id)

    def require_flow_object(self, flow_object_id: str) -> FlowObject:
        """Get flow object by ID, raising UnknownElementError if absent."""
        flow_object = self.get_flow_object(flow_object_id)
        if flow_object is None:
            raise UnknownElementError(
                f"Process '{self.id}' has no flow object with id '{flow_object_id}'"
            )
        return flow_object

    def get_sequence_flow(self, sequence_flow_id: str) -> Optional[SequenceFlow]:
        """Get sequence flow by ID - O(1) lookup."""
        return self._sequence_flow_index.get(sequence_flow_id)

    def get_outgoing_sequence_flows(self, flow_object: FlowObjectRef) -> List[SequenceFlow]:
        """Get all sequence flows leaving this flow object."""
        return list(self._outgoing_flows.get(self._resolve_id(flow_object), []))

    def get_incoming_sequence_flows(self, flow_object: FlowObjectRef) -> List[SequenceFlow]:
        """Get all sequence flows entering this flow object."""
        return list(self._incoming_flows.get(self._resolve_id(flow_object), []))

    def has_outgoing_sequence_flows(self, flow_object: FlowObjectRef) -> bool:
        return bool(self._outgoing_flows.get(self._resolve_id(flow_object)))

    def has_incoming_sequence_flows(self, flow_object: FlowObjectRef) -> bool:
        return bool(self._incoming_flows.get(self._resolve_id(flow_object)))

    def get_flow_objects_by_type(self, element_type: Union[BPMNElementType, str]) -> List[FlowObject]:
        element_type = getattr(element_type, "value", element_type)
        return [fo for fo in self.flow_objects if fo.type == element_type]

    def get_start_events(self) -> List[FlowObject]:
        return self.get_flow_objects_by_type(BPMNElementType.START_EVENT)

    def get_end_events(self) -> List[FlowObject]:
        return self.get_flow_objects_by_type(BPMNElementType.END_EVENT)

    # Validation

    def validate_structure(
        self, error_queue: Optional[ErrorQueue] = None, fail_on_error: bool = False
    ) -> ErrorQueue:
        """
        Validate every flow object against the rules of its kind.

        All flow objects are checked even after a defect is found, so a single
        run reports every problem in the definition.

        Args:
            error_queue: Queue to append to; a new one is created when omitted
            fail_on_error: Raise ProcessDefinitionValidationError if any
                error was collected

        Returns:
            The error queue holding the findings
        """
        queue = error_queue if error_queue is not None else ErrorQueue()
        errors_before = len(queue)

        with span(
            "validate_process_definition",
            {"process.id": self.id, "process.flow_objects": len(self.flow_objects)},
        ):
            for flow_object in self.flow_objects:
                flow_object.validate_structure(self, queue.for_element(flow_object.id))

        found = len(queue) - errors_before
        record_metric("validation_errors_total", found, {"process_id": self.id})
        if found:
            logger.info(f"Process '{self.id}' has {found} validation error(s)")
        else:
            logger.info(f"Process '{self.id}' is structurally valid")

        if fail_on_error:
            queue.raise_if_errors()
        return queue


__all__ = ["ProcessDefinition"]

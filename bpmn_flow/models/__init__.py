"""Process graph models: flow objects, sequence flows, and process definitions."""

from .flow_objects import BPMNElementType, FlowObject, SequenceFlow
from .process_definition import ProcessDefinition
from .registry import (
    FlowObjectSpec,
    create_flow_object,
    get_flow_object_spec,
    register_flow_object_spec,
)

__all__ = [
    "BPMNElementType",
    "FlowObject",
    "FlowObjectSpec",
    "ProcessDefinition",
    "SequenceFlow",
    "create_flow_object",
    "get_flow_object_spec",
    "register_flow_object_spec",
]

"""Loading of process definitions from BPMN 2.0 XML."""

from .loader import BPMN_MODEL_NS, load_process_definitions, load_process_definitions_from_file

__all__ = [
    "BPMN_MODEL_NS",
    "load_process_definitions",
    "load_process_definitions_from_file",
]

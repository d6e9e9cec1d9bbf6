"""
bpmn-flow: Flow Objects for BPMN 2.0 Process Graphs

Identity, default token forwarding, and structural validation shared by every
node of a BPMN process definition, together with an in-memory process
definition, a BPMN XML loader, and a command-line validator.
"""

# Core components
from bpmn_flow.config import ValidationConfig
from bpmn_flow.core.observability import ObservabilityConfig, ObservabilityManager

# Exceptions
from bpmn_flow.exceptions import (
    BPMNFlowError,
    DuplicateElementError,
    FlowObjectFinalizedError,
    ProcessDefinitionFinalizedError,
    ProcessDefinitionParseError,
    ProcessDefinitionValidationError,
    UnknownElementError,
)

# Execution
from bpmn_flow.execution import ExecutionContext, forward_to_all_outgoing
from bpmn_flow.execution.process_instance import ProcessInstance, Token

# Models
from bpmn_flow.models import (
    BPMNElementType,
    FlowObject,
    FlowObjectSpec,
    ProcessDefinition,
    SequenceFlow,
    create_flow_object,
    get_flow_object_spec,
    register_flow_object_spec,
)

# Loading
from bpmn_flow.parsing import load_process_definitions, load_process_definitions_from_file

# Validation
from bpmn_flow.validation import ErrorQueue, FlowObjectErrorCode, ValidationError

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core
    "ObservabilityConfig",
    "ObservabilityManager",
    "ValidationConfig",
    # Exceptions
    "BPMNFlowError",
    "DuplicateElementError",
    "FlowObjectFinalizedError",
    "ProcessDefinitionFinalizedError",
    "ProcessDefinitionParseError",
    "ProcessDefinitionValidationError",
    "UnknownElementError",
    # Execution
    "ExecutionContext",
    "ProcessInstance",
    "Token",
    "forward_to_all_outgoing",
    # Models
    "BPMNElementType",
    "FlowObject",
    "FlowObjectSpec",
    "ProcessDefinition",
    "SequenceFlow",
    "create_flow_object",
    "get_flow_object_spec",
    "register_flow_object_spec",
    # Loading
    "load_process_definitions",
    "load_process_definitions_from_file",
    # Validation
    "ErrorQueue",
    "FlowObjectErrorCode",
    "ValidationError",
]

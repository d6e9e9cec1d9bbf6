"""
Exception hierarchy for bpmn-flow.

Structural defects found by the validation rules are never raised; they are
reported through an error sink. The exceptions below cover misuse of the
definition API, unreadable input, and the explicit fail-on-error path.
"""

from typing import TYPE_CHECKING, List

if TYPE_CHECKING:
    from bpmn_flow.validation.errors import ValidationError


class BPMNFlowError(Exception):
    """Base class for all exceptions raised by bpmn-flow."""

    pass


class FlowObjectFinalizedError(BPMNFlowError):
    """Raised when a finalized flow object is modified."""

    pass


class ProcessDefinitionFinalizedError(BPMNFlowError):
    """Raised when elements are added to a finalized process definition."""

    pass


class DuplicateElementError(BPMNFlowError):
    """Raised when an element id is already used within a process definition."""

    pass


class UnknownElementError(BPMNFlowError):
    """Raised when a lookup references an element the definition does not contain."""

    pass


class ProcessDefinitionParseError(BPMNFlowError):
    """Raised when a BPMN document cannot be turned into process definitions."""

    pass


class ProcessDefinitionValidationError(BPMNFlowError):
    """Raised on request when validation collected one or more errors."""

    def __init__(self, errors: List["ValidationError"]):
        self.errors = list(errors)
        codes = ", ".join(error.code for error in self.errors)
        super().__init__(f"Process definition has {len(self.errors)} validation error(s): {codes}")

"""
Error Queue

Concrete append-only sink for validation findings. Appends are serialized
with a lock so independent flow objects can be validated concurrently.
"""

import logging
import threading
from typing import List, Optional

from bpmn_flow.exceptions import ProcessDefinitionValidationError
from bpmn_flow.validation.errors import ValidationError

logger = logging.getLogger(__name__)


class ErrorQueue:
    """Collects validation errors in the order they are reported."""

    def __init__(self):
        """Initialize an empty queue."""
        self._errors: List[ValidationError] = []
        self._lock = threading.Lock()

    def add_error(self, code: str, message: str, element_id: Optional[str] = None) -> None:
        """Append an error record.

        Args:
            code: Error code, e.g. ``FO1``, or a ``FlowObjectErrorCode`` member
            message: Rendered, human-readable description
            element_id: Id of the offending element, when known
        """
        code = getattr(code, "value", code)
        error = ValidationError(code=str(code), message=message, element_id=element_id)
        with self._lock:
            self._errors.append(error)
        logger.warning(f"Validation error {error.code}: {error.message}")

    def for_element(self, element_id: str) -> "ElementErrorSink":
        """Get a sink that tags every error it receives with ``element_id``."""
        return ElementErrorSink(self, element_id)

    @property
    def errors(self) -> List[ValidationError]:
        """Snapshot of the collected errors."""
        with self._lock:
            return list(self._errors)

    def has_errors(self) -> bool:
        with self._lock:
            return bool(self._errors)

    def get_errors_by_code(self, code: str) -> List[ValidationError]:
        """Get all errors reported with the given code."""
        code = getattr(code, "value", code)
        return [error for error in self.errors if error.code == code]

    def clear(self) -> None:
        with self._lock:
            self._errors.clear()

    def raise_if_errors(self) -> None:
        """Raise ProcessDefinitionValidationError if anything was collected."""
        errors = self.errors
        if errors:
            raise ProcessDefinitionValidationError(errors)

    def __len__(self) -> int:
        with self._lock:
            return len(self._errors)


class ElementErrorSink:
    """Error sink bound to a single element id."""

    def __init__(self, queue: ErrorQueue, element_id: str):
        self.queue = queue
        self.element_id = element_id

    def add_error(self, code: str, message: str) -> None:
        self.queue.add_error(code, message, element_id=self.element_id)


__all__ = ["ErrorQueue", "ElementErrorSink"]

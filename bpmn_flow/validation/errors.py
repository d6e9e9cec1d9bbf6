"""
Validation error vocabulary and records.

The codes are part of the external contract: consumers key off them, so the
values must stay bit-exact.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FlowObjectErrorCode(str, Enum):
    """Error codes emitted by the flow object validation rules."""

    MISSING_NAME = "FO1"
    MISSING_OUTGOING = "FO2"
    NOT_ONE_OUTGOING = "FO3"
    UNEXPECTED_OUTGOING = "FO4"
    MISSING_INCOMING = "FO5"
    # Shares FO5 with MISSING_INCOMING. Consumers already depend on the
    # duplicated code, so this is an alias and not a distinct member.
    UNEXPECTED_INCOMING = "FO5"


@dataclass(frozen=True)
class ValidationError:
    """A single structural defect reported to an error sink."""

    code: str
    message: str
    element_id: Optional[str] = None

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

"""
Error kinds for SemNet.

Every rejected call raises ConceptError with one of two kinds. There is
no silent no-op path and no process termination in library code; the
caller decides whether to retry or abort.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional


class ConceptErrorKind(Enum):
    """
    The two error kinds of the core.

    ALLOCATION_FAILURE: storage for a concept or slot growth is unavailable
    INVALID_ARGUMENT:   a required argument is absent, mistyped, torn down,
                        or belongs to another network
    """
    ALLOCATION_FAILURE = "allocation_failure"
    INVALID_ARGUMENT = "invalid_argument"


class ConceptError(Exception):
    """Raised when a concept operation is rejected."""

    def __init__(
        self,
        kind: ConceptErrorKind,
        reason: str,
        concept_id: Optional[str] = None,
    ):
        self.kind = kind
        self.reason = reason
        self.concept_id = concept_id
        super().__init__(f"[{kind.value}] {reason}")


def invalid_argument(reason: str, concept_id: Optional[str] = None) -> ConceptError:
    return ConceptError(ConceptErrorKind.INVALID_ARGUMENT, reason, concept_id)


def allocation_failure(reason: str, concept_id: Optional[str] = None) -> ConceptError:
    return ConceptError(ConceptErrorKind.ALLOCATION_FAILURE, reason, concept_id)


def require_text(value: Any, argument: str, concept_id: Optional[str] = None) -> str:
    """
    Validate a required string argument and return it.

    Empty strings are accepted; labels are free-form.

    Raises:
        ConceptError: INVALID_ARGUMENT if value is None or not a str
    """
    if value is None:
        raise invalid_argument(f"{argument} is required", concept_id)
    if not isinstance(value, str):
        raise invalid_argument(
            f"{argument} must be str, got {type(value).__name__}",
            concept_id,
        )
    return value

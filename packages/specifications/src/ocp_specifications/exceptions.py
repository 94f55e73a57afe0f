"""
Specification exception hierarchy.

Two families hang off ``SpecificationError``:

* ``ConstructionError``: a specification tree (or a call into the filter
  engine) is malformed.  Raised synchronously, before anything is evaluated.
* ``EvaluationError``: a specification could not decide whether a candidate
  satisfies it.  This is never the same thing as "not satisfied".

Leaf libraries derive their own errors from one of the two families.

All exceptions provide ``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from typing import Any


class SpecificationError(Exception):
    """Base exception for all specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


# ── Construction ─────────────────────────────────────────────────────


class ConstructionError(SpecificationError):
    """A specification tree could not be built."""


class MissingSpecificationError(ConstructionError, ValueError):
    """A required specification argument was ``None``."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Specification argument '{argument}' must not be None")

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MISSING_SPECIFICATION",
            "argument": self.argument,
        }


class InvalidSpecificationError(ConstructionError, TypeError):
    """An argument is not a specification instance."""

    def __init__(self, argument: str, received: object) -> None:
        self.argument = argument
        self.received = (
            f"class {received.__name__}"
            if isinstance(received, type)
            else type(received).__name__
        )
        super().__init__(
            f"Specification argument '{argument}' must implement "
            f"is_satisfied_by(), got {self.received}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_SPECIFICATION",
            "argument": self.argument,
            "received": self.received,
        }


# ── Evaluation ───────────────────────────────────────────────────────


class EvaluationError(SpecificationError):
    """A specification could not determine whether a candidate satisfies it."""


class FilterEvaluationError(EvaluationError):
    """
    Evaluation failed while filtering.

    Raised by the filter engine at the position of the failing item.  The
    original exception is available as ``__cause__``.
    """

    def __init__(self, position: int, item: Any, cause: BaseException) -> None:
        self.position = position
        self.item = item
        self.cause = cause
        super().__init__(
            f"Specification evaluation failed for item at position {position}: "
            f"{type(cause).__name__}: {cause}"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FILTER_EVALUATION_ERROR",
            "position": self.position,
            "cause": type(self.cause).__name__,
            "message": str(self.cause),
        }

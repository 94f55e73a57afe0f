"""Specification pattern primitives."""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

from .exceptions import InvalidSpecificationError, MissingSpecificationError

T = TypeVar("T", contravariant=True)


@runtime_checkable
class ISpecification(Protocol[T]):
    """
    Protocol for the Specification pattern.

    Encapsulates a selection criterion over candidates of type ``T``.
    Implementations must be pure: the answer depends only on the candidate
    and the specification's own state, which never changes after
    construction.  That makes a specification safe to share between trees
    and between threads.
    """

    def is_satisfied_by(self, candidate: T) -> bool:
        """
        Check whether *candidate* satisfies the criterion.

        Returning ``False`` is the normal "does not match" outcome.  Raise
        only when the question cannot be answered at all.
        """
        ...


def require_specification(spec: Any, argument: str) -> ISpecification[Any]:
    """Return *spec* unchanged, or raise if it is absent or not a specification."""
    if spec is None:
        raise MissingSpecificationError(argument)
    if isinstance(spec, type) or not isinstance(spec, ISpecification):
        raise InvalidSpecificationError(argument, spec)
    return spec

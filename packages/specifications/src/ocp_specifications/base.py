"""
Composite specifications and combinator helpers.

Every combinator validates its children at construction time and keeps
them behind read-only properties, so a tree is immutable (and therefore
acyclic) once built.  Evaluation is strictly left to right with
short-circuiting.
"""

from __future__ import annotations

from abc import abstractmethod
from functools import reduce
from typing import Any, Generic, TypeVar

from .specification import ISpecification, require_specification

T = TypeVar("T", contravariant=True)


class BaseSpecification(Generic[T], ISpecification[T]):
    """Base class for specifications with logic operator support."""

    @abstractmethod
    def is_satisfied_by(self, candidate: T) -> bool: ...

    def __and__(self, other: ISpecification[T]) -> AndSpecification[T]:
        return AndSpecification(self, other)

    def __or__(self, other: ISpecification[T]) -> OrSpecification[T]:
        return OrSpecification(self, other)

    def __invert__(self) -> NotSpecification[T]:
        return NotSpecification(self)

    def merge(self, other: ISpecification[T]) -> AndSpecification[T]:
        """Merge with another specification using logical AND."""
        return AndSpecification(self, other)


class AndSpecification(BaseSpecification[T]):
    """Logical AND; ``second`` is only evaluated when ``first`` holds."""

    def __init__(self, first: ISpecification[T], second: ISpecification[T]) -> None:
        self._first = require_specification(first, "first")
        self._second = require_specification(second, "second")

    @property
    def first(self) -> ISpecification[T]:
        return self._first

    @property
    def second(self) -> ISpecification[T]:
        return self._second

    def is_satisfied_by(self, candidate: T) -> bool:
        if not self._first.is_satisfied_by(candidate):
            return False
        return bool(self._second.is_satisfied_by(candidate))

    def __repr__(self) -> str:
        return f"AndSpecification({self._first!r}, {self._second!r})"


class OrSpecification(BaseSpecification[T]):
    """Logical OR; ``second`` is only evaluated when ``first`` fails."""

    def __init__(self, first: ISpecification[T], second: ISpecification[T]) -> None:
        self._first = require_specification(first, "first")
        self._second = require_specification(second, "second")

    @property
    def first(self) -> ISpecification[T]:
        return self._first

    @property
    def second(self) -> ISpecification[T]:
        return self._second

    def is_satisfied_by(self, candidate: T) -> bool:
        if self._first.is_satisfied_by(candidate):
            return True
        return bool(self._second.is_satisfied_by(candidate))

    def __repr__(self) -> str:
        return f"OrSpecification({self._first!r}, {self._second!r})"


class NotSpecification(BaseSpecification[T]):
    """Logical NOT composite specification."""

    def __init__(self, inner: ISpecification[T]) -> None:
        self._inner = require_specification(inner, "inner")

    @property
    def inner(self) -> ISpecification[T]:
        return self._inner

    def is_satisfied_by(self, candidate: T) -> bool:
        return not self._inner.is_satisfied_by(candidate)

    def __repr__(self) -> str:
        return f"NotSpecification({self._inner!r})"


class AlwaysSatisfied(BaseSpecification[Any]):
    """Identity for AND: every candidate matches."""

    def is_satisfied_by(self, candidate: Any) -> bool:  # noqa: ARG002
        return True

    def __repr__(self) -> str:
        return "AlwaysSatisfied()"


class NeverSatisfied(BaseSpecification[Any]):
    """Identity for OR: no candidate matches."""

    def is_satisfied_by(self, candidate: Any) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return "NeverSatisfied()"


# -- functional combinators --------------------------------------------------


def and_(first: ISpecification[T], second: ISpecification[T]) -> AndSpecification[T]:
    return AndSpecification(first, second)


def or_(first: ISpecification[T], second: ISpecification[T]) -> OrSpecification[T]:
    return OrSpecification(first, second)


def not_(inner: ISpecification[T]) -> NotSpecification[T]:
    return NotSpecification(inner)


def all_of(*specifications: ISpecification[T]) -> ISpecification[T]:
    """
    Left fold with AND: ``all_of(a, b, c)`` is ``(a & b) & c``.

    With no arguments the result is satisfied by every candidate; with one
    argument it is that specification itself.
    """
    specs = _validated(specifications)
    if not specs:
        return AlwaysSatisfied()
    return reduce(AndSpecification, specs)


def any_of(*specifications: ISpecification[T]) -> ISpecification[T]:
    """
    Left fold with OR: ``any_of(a, b, c)`` is ``(a | b) | c``.

    With no arguments the result is satisfied by no candidate; with one
    argument it is that specification itself.
    """
    specs = _validated(specifications)
    if not specs:
        return NeverSatisfied()
    return reduce(OrSpecification, specs)


def _validated(
    specifications: tuple[ISpecification[T], ...],
) -> list[ISpecification[T]]:
    return [
        require_specification(spec, f"specifications[{idx}]")
        for idx, spec in enumerate(specifications)
    ]

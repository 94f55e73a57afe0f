"""
Lazy, specification-driven filtering.

The engine is a pure function of ``(items, specification)``: it keeps no
state between calls, never copies or mutates the source and evaluates the
specification exactly once per item, only when the consumer asks for the
next match.

Usage::

    from ocp_specifications import filter_by

    for product in filter_by(products, color & size):
        ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, TypeVar, overload

from .exceptions import FilterEvaluationError
from .specification import ISpecification, require_specification

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
D = TypeVar("D")

logger = logging.getLogger(__name__)


class IFilter(Protocol[T]):
    """Applies a specification to a collection."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]: ...


def filter_by(items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
    """
    Return a lazy iterator over the items of *items* that satisfy *spec*.

    Argument errors are raised here, before any item is looked at.
    Evaluation errors are raised from the iterator at the position of the
    failing item as :class:`FilterEvaluationError`; the iterator is
    exhausted afterwards.

    Raises:
        MissingSpecificationError: If *spec* is ``None``.
        InvalidSpecificationError: If *spec* has no ``is_satisfied_by``.
        TypeError: If *items* is not iterable.
    """
    spec = require_specification(spec, "spec")
    source = iter(items)
    return _traverse(source, spec)


@overload
def first_match(items: Iterable[T], spec: ISpecification[T]) -> T | None: ...


@overload
def first_match(items: Iterable[T], spec: ISpecification[T], default: D) -> T | D: ...


def first_match(
    items: Iterable[T], spec: ISpecification[T], default: object = None
) -> object:
    """Return the first item satisfying *spec*, or *default* when none does."""
    return next(filter_by(items, spec), default)


class SpecificationFilter(IFilter[T]):
    """Stateless :class:`IFilter` backed by :func:`filter_by`."""

    def filter(self, items: Iterable[T], spec: ISpecification[T]) -> Iterator[T]:
        return filter_by(items, spec)


def _traverse(source: Iterator[T], spec: ISpecification[T]) -> Iterator[T]:
    logger.debug("Filtering started with %r", spec)
    matched = 0
    position = -1
    for position, item in enumerate(source):
        try:
            satisfied = spec.is_satisfied_by(item)
        except Exception as exc:
            logger.warning(
                "Evaluation of %r failed at position %d: %s", spec, position, exc
            )
            raise FilterEvaluationError(position, item, exc) from exc
        if satisfied:
            matched += 1
            yield item
    logger.debug("Filtering finished: %d seen, %d matched", position + 1, matched)

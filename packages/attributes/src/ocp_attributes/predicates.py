"""
Built-in predicates and the default registry.

Enum members are compared by value in the text predicates, so
``startswith "Gre"`` matches ``Color.GREEN`` whose value is ``"Green"``.
A ``None`` field never matches an ordering, range or text predicate.
"""

from __future__ import annotations

import operator
import re
from collections.abc import Callable
from enum import Enum
from functools import wraps
from typing import Any

from .operators import AttributeOperator
from .registry import OperatorRegistry, Predicate


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def equal(field_value: Any, expected: Any) -> bool:
    return bool(field_value == expected)


def not_equal(field_value: Any, expected: Any) -> bool:
    return bool(field_value != expected)


def _ordering(compare: Callable[[Any, Any], Any]) -> Predicate:
    def predicate(field_value: Any, bound: Any) -> bool:
        if field_value is None:
            return False
        return bool(compare(field_value, bound))

    predicate.__name__ = compare.__name__
    return predicate


greater_than = _ordering(operator.gt)
less_than = _ordering(operator.lt)
greater_equal = _ordering(operator.ge)
less_equal = _ordering(operator.le)


def is_in(field_value: Any, members: Any) -> bool:
    return field_value in members


def not_in(field_value: Any, members: Any) -> bool:
    return field_value not in members


def between(field_value: Any, bounds: Any) -> bool:
    """Inclusive range check against a ``(low, high)`` pair."""
    try:
        low, high = bounds
    except (TypeError, ValueError) as exc:
        raise ValueError(
            f"'between' expects a (low, high) pair, got {bounds!r}"
        ) from exc
    if field_value is None:
        return False
    return bool(low <= field_value <= high)


def _textual(match: Callable[[str, str], bool]) -> Predicate:
    @wraps(match)
    def predicate(field_value: Any, pattern: Any) -> bool:
        if field_value is None:
            return False
        return match(str(_plain(field_value)), str(_plain(pattern)))

    return predicate


def contains(field_value: Any, expected: Any) -> bool:
    """Membership for collections, substring match for everything else."""
    if isinstance(field_value, list | tuple | set | frozenset):
        return expected in field_value
    return _substring(field_value, expected)


@_textual
def _substring(text: str, pattern: str) -> bool:
    return pattern in text


@_textual
def icontains(text: str, pattern: str) -> bool:
    return pattern.casefold() in text.casefold()


@_textual
def startswith(text: str, pattern: str) -> bool:
    return text.startswith(pattern)


@_textual
def endswith(text: str, pattern: str) -> bool:
    return text.endswith(pattern)


@_textual
def regex(text: str, pattern: str) -> bool:
    """Unanchored ``re.search``; anchor the pattern to match the whole value."""
    return re.search(pattern, text) is not None


def is_null(field_value: Any, _expected: Any) -> bool:
    return field_value is None


def is_not_null(field_value: Any, _expected: Any) -> bool:
    return field_value is not None


DEFAULT_PREDICATES: dict[AttributeOperator, Predicate] = {
    AttributeOperator.EQ: equal,
    AttributeOperator.NE: not_equal,
    AttributeOperator.GT: greater_than,
    AttributeOperator.LT: less_than,
    AttributeOperator.GE: greater_equal,
    AttributeOperator.LE: less_equal,
    AttributeOperator.IN: is_in,
    AttributeOperator.NOT_IN: not_in,
    AttributeOperator.BETWEEN: between,
    AttributeOperator.CONTAINS: contains,
    AttributeOperator.ICONTAINS: icontains,
    AttributeOperator.STARTSWITH: startswith,
    AttributeOperator.ENDSWITH: endswith,
    AttributeOperator.REGEX: regex,
    AttributeOperator.IS_NULL: is_null,
    AttributeOperator.IS_NOT_NULL: is_not_null,
}


def build_default_registry() -> OperatorRegistry:
    """Return a fresh registry holding every built-in predicate."""
    return OperatorRegistry(DEFAULT_PREDICATES)

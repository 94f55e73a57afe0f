"""
Operator registry for attribute leaves.

Each :class:`AttributeOperator` maps to a plain predicate
``(field_value, expected) -> bool``.  A leaf looks its predicate up once,
when it is built, so an operator the registry lacks is a construction
error rather than a failure halfway through a traversal.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import Any

from .exceptions import OperatorNotFoundError
from .operators import AttributeOperator

logger = logging.getLogger(__name__)

Predicate = Callable[[Any, Any], bool]


class OperatorRegistry:
    """
    Predicates keyed by operator.

    Populate it while wiring the application, then share it read-only;
    leaves keep the predicate they resolved, so later registrations only
    affect leaves built afterwards.
    """

    def __init__(
        self, predicates: Mapping[AttributeOperator, Predicate] | None = None
    ) -> None:
        self._predicates: dict[AttributeOperator, Predicate] = {}
        for op, predicate in (predicates or {}).items():
            self.register(op, predicate)

    def register(self, op: AttributeOperator | str, predicate: Predicate) -> None:
        op = AttributeOperator.parse(op)
        logger.debug(
            "Registering %s for operator %r",
            getattr(predicate, "__name__", repr(predicate)),
            op.value,
        )
        self._predicates[op] = predicate

    def resolve(self, op: AttributeOperator) -> Predicate:
        try:
            return self._predicates[op]
        except KeyError:
            raise OperatorNotFoundError(
                op.value, [known.value for known in self._predicates]
            ) from None

    def __contains__(self, op: object) -> bool:
        return op in self._predicates

    @property
    def supported(self) -> frozenset[AttributeOperator]:
        return frozenset(self._predicates)

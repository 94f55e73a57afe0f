from __future__ import annotations

from enum import Enum

from .exceptions import OperatorNotFoundError


class AttributeOperator(str, Enum):
    """Comparisons an :class:`AttributeSpecification` can make."""

    # Comparison
    EQ = "="
    NE = "!="
    GT = ">"
    LT = "<"
    GE = ">="
    LE = "<="

    # Membership
    IN = "in"
    NOT_IN = "not_in"
    BETWEEN = "between"

    # Text
    CONTAINS = "contains"
    ICONTAINS = "icontains"
    STARTSWITH = "startswith"
    ENDSWITH = "endswith"
    REGEX = "regex"

    # Null checks
    IS_NULL = "is_null"
    IS_NOT_NULL = "is_not_null"

    @classmethod
    def parse(cls, op: AttributeOperator | str) -> AttributeOperator:
        """Accept a member or its symbol, case-insensitively."""
        if isinstance(op, cls):
            return op
        symbol = str(op).lower()
        try:
            return cls(symbol)
        except ValueError:
            raise OperatorNotFoundError(symbol, [m.value for m in cls]) from None

"""Generic leaf comparing one attribute path of the candidate with a value."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from ocp_specifications import BaseSpecification

from .exceptions import FieldNotFoundError
from .operators import AttributeOperator

if TYPE_CHECKING:
    from .registry import OperatorRegistry

T = TypeVar("T", contravariant=True)


class AttributeSpecification(BaseSpecification[T]):
    """
    ``candidate.<attr> <op> val``.

    ``attr`` is a dot path over attributes and mapping keys.  A list or
    tuple met along the path is traversed element-wise, and a ``None``
    ends the walk with ``None``.  A segment that does not exist raises
    :class:`FieldNotFoundError`: a typo in a path is a failure, not a
    non-match.

    The predicate for ``op`` is taken from *registry* at construction.
    """

    def __init__(
        self,
        attr: str,
        op: AttributeOperator | str,
        val: Any = None,
        *,
        registry: OperatorRegistry,
    ) -> None:
        if registry is None:
            raise ValueError(
                "registry parameter is required; "
                "build_default_registry() returns one with every built-in operator"
            )
        if not attr:
            raise ValueError("attr must be a non-empty attribute path")
        self._attr = attr
        self._op = AttributeOperator.parse(op)
        self._val = val
        self._predicate = registry.resolve(self._op)

    @property
    def attr(self) -> str:
        return self._attr

    @property
    def op(self) -> AttributeOperator:
        return self._op

    @property
    def val(self) -> Any:
        return self._val

    def is_satisfied_by(self, candidate: T) -> bool:
        return bool(self._predicate(resolve_path(candidate, self._attr), self._val))

    def __repr__(self) -> str:
        return (
            f"AttributeSpecification({self._attr!r}, {self._op.value!r}, "
            f"{self._val!r})"
        )


def resolve_path(obj: Any, path: str) -> Any:
    parts = path.split(".")
    for idx, part in enumerate(parts):
        if obj is None:
            return None
        if isinstance(obj, list | tuple):
            rest = ".".join(parts[idx:])
            return [resolve_path(item, rest) for item in obj]
        obj = _lookup(obj, part, path)
    return obj


def _lookup(obj: Any, part: str, full_path: str) -> Any:
    if isinstance(obj, Mapping):
        if part not in obj:
            raise FieldNotFoundError(
                part, type(obj).__name__, [str(k) for k in obj], full_path=full_path
            )
        return obj[part]
    try:
        return getattr(obj, part)
    except AttributeError:
        raise FieldNotFoundError(
            part, type(obj).__name__, _public_fields(obj), full_path=full_path
        ) from None


def _public_fields(obj: Any) -> list[str]:
    # pydantic models list their declared fields on the class
    model_fields = getattr(type(obj), "model_fields", None)
    if isinstance(model_fields, dict):
        return list(model_fields)
    return [name for name in dir(obj) if not name.startswith("_")]

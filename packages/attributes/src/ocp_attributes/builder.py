"""
Fluent assembly of attribute conditions.

Example::

    spec = (
        SpecificationBuilder()
        .where("size", "=", Size.LARGE)
        .or_group()
        .where("color", "=", Color.RED)
        .where("color", "=", Color.BLUE)
        .end_group()
        .build()
    )
    # (size = Large) AND ((color = Red) OR (color = Blue))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ocp_specifications import all_of, any_of, not_, require_specification

from .attribute import AttributeSpecification
from .predicates import build_default_registry

if TYPE_CHECKING:
    from ocp_specifications import ISpecification

    from .operators import AttributeOperator
    from .registry import OperatorRegistry


def _negate(*members: ISpecification[Any]) -> ISpecification[Any]:
    if len(members) != 1:
        raise ValueError(
            f"A NOT group takes exactly one condition, got {len(members)}"
        )
    return not_(members[0])


@dataclass
class _Group:
    label: str
    fold: Callable[..., ISpecification[Any]]
    members: list[ISpecification[Any]] = field(default_factory=list)

    def close(self) -> ISpecification[Any]:
        if not self.members:
            raise ValueError(f"Cannot close an empty {self.label} group")
        return self.fold(*self.members)


class SpecificationBuilder:
    """
    Builds a specification tree one condition at a time.

    The top level is an implicit AND group.  ``and_group``, ``or_group``
    and ``not_group`` open a nested group that ``end_group`` closes.
    Members of a group keep the order they were added in, which is the
    order they are evaluated in.
    """

    def __init__(self, registry: OperatorRegistry | None = None) -> None:
        self._registry = registry if registry is not None else build_default_registry()
        self._groups = [_Group("AND", all_of)]

    def where(
        self, attr: str, op: AttributeOperator | str, val: Any = None
    ) -> SpecificationBuilder:
        return self.add(AttributeSpecification(attr, op, val, registry=self._registry))

    def add(self, spec: ISpecification[Any]) -> SpecificationBuilder:
        self._groups[-1].members.append(require_specification(spec, "spec"))
        return self

    def and_group(self) -> SpecificationBuilder:
        return self._open("AND", all_of)

    def or_group(self) -> SpecificationBuilder:
        return self._open("OR", any_of)

    def not_group(self) -> SpecificationBuilder:
        return self._open("NOT", _negate)

    def end_group(self) -> SpecificationBuilder:
        if len(self._groups) == 1:
            raise ValueError("end_group() called with no open group")
        closed = self._groups.pop().close()
        self._groups[-1].members.append(closed)
        return self

    def build(self) -> ISpecification[Any]:
        """
        Return the assembled tree.

        Raises:
            ValueError: If a group is still open or nothing was added.
        """
        if len(self._groups) > 1:
            raise ValueError(
                f"{len(self._groups) - 1} group(s) still open, "
                "call end_group() before build()"
            )
        if not self._groups[0].members:
            raise ValueError("No conditions added to builder")
        return self._groups[0].close()

    def reset(self) -> SpecificationBuilder:
        self._groups = [_Group("AND", all_of)]
        return self

    def _open(
        self, label: str, fold: Callable[..., ISpecification[Any]]
    ) -> SpecificationBuilder:
        self._groups.append(_Group(label, fold))
        return self

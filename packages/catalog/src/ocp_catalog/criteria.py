"""
Product criteria.

Each criterion is an independent leaf specification; new ones are added
next to these without touching the filter engine or the combinators.
"""

from __future__ import annotations

from ocp_specifications import BaseSpecification

from .products import Color, Product, Size


class ColorSpecification(BaseSpecification[Product]):
    """Product has the given color."""

    def __init__(self, color: Color) -> None:
        self._color = Color(color)

    @property
    def color(self) -> Color:
        return self._color

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.color == self._color

    def __repr__(self) -> str:
        return f"ColorSpecification({self._color.value})"


class SizeSpecification(BaseSpecification[Product]):
    """Product has the given size."""

    def __init__(self, size: Size) -> None:
        self._size = Size(size)

    @property
    def size(self) -> Size:
        return self._size

    def is_satisfied_by(self, candidate: Product) -> bool:
        return candidate.size == self._size

    def __repr__(self) -> str:
        return f"SizeSpecification({self._size.value})"


class NameSpecification(BaseSpecification[Product]):
    """Product name matches exactly, or case-insensitively when requested."""

    def __init__(self, name: str, *, ignore_case: bool = False) -> None:
        if not name:
            raise ValueError("name must be a non-empty string")
        self._name = name
        self._ignore_case = ignore_case

    def is_satisfied_by(self, candidate: Product) -> bool:
        if self._ignore_case:
            return candidate.name.casefold() == self._name.casefold()
        return candidate.name == self._name

    def __repr__(self) -> str:
        return f"NameSpecification({self._name!r}, ignore_case={self._ignore_case})"

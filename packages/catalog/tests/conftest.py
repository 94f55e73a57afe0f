"""Shared fixtures for catalog tests."""

from __future__ import annotations

import pytest

from ocp_catalog import Color, Product, Size


@pytest.fixture
def apple() -> Product:
    return Product(name="Apple", color=Color.GREEN, size=Size.SMALL)


@pytest.fixture
def tree() -> Product:
    return Product(name="Tree", color=Color.GREEN, size=Size.LARGE)


@pytest.fixture
def house() -> Product:
    return Product(name="House", color=Color.BLUE, size=Size.LARGE)


@pytest.fixture
def products(apple: Product, tree: Product, house: Product) -> list[Product]:
    return [apple, tree, house]

"""Shared fixtures for attribute leaf tests."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import pytest

from ocp_attributes import build_default_registry


@dataclass(frozen=True)
class Widget:
    name: str
    weight: int
    tags: tuple[str, ...] = ()
    owner: Any = None


@pytest.fixture
def registry():
    return build_default_registry()


@pytest.fixture
def widgets() -> list[Widget]:
    return [
        Widget(name="bolt", weight=5, tags=("metal", "small")),
        Widget(name="crate", weight=40, tags=("wood",)),
        Widget(name="anvil", weight=90, tags=("metal", "heavy")),
        Widget(name="feather", weight=1, tags=()),
    ]

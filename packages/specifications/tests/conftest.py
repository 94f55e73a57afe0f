"""Shared fixtures for specifications tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest


@dataclass(frozen=True)
class Widget:
    name: str
    weight: int


@pytest.fixture
def widgets() -> list[Widget]:
    return [
        Widget(name="bolt", weight=5),
        Widget(name="crate", weight=40),
        Widget(name="anvil", weight=90),
        Widget(name="feather", weight=1),
    ]

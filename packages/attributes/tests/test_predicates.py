"""Tests for the built-in predicates and the operator registry."""

from __future__ import annotations

import logging
from enum import Enum

import pytest

from ocp_attributes import (
    AttributeOperator,
    OperatorNotFoundError,
    OperatorRegistry,
    build_default_registry,
)

OP = AttributeOperator


class Shade(str, Enum):
    LIGHT = "Light"
    DARK = "Dark"


@pytest.mark.parametrize(
    ("op", "field_value", "expected", "result"),
    [
        (OP.EQ, 3, 3, True),
        (OP.EQ, 3, 4, False),
        (OP.NE, "a", "b", True),
        (OP.GT, 5, 3, True),
        (OP.GT, None, 3, False),
        (OP.LT, 2, 3, True),
        (OP.GE, 3, 3, True),
        (OP.LE, 4, 3, False),
        (OP.LE, None, 3, False),
        (OP.IN, "b", ["a", "b"], True),
        (OP.NOT_IN, "c", ["a", "b"], True),
        (OP.BETWEEN, 5, (1, 5), True),
        (OP.BETWEEN, 6, (1, 5), False),
        (OP.BETWEEN, None, (1, 5), False),
        (OP.CONTAINS, "Green apple", "apple", True),
        (OP.CONTAINS, ("metal", "small"), "metal", True),
        (OP.CONTAINS, ("metallic",), "metal", False),
        (OP.CONTAINS, None, "apple", False),
        (OP.ICONTAINS, "Green Apple", "APPLE", True),
        (OP.STARTSWITH, "House", "Ho", True),
        (OP.ENDSWITH, "House", "se", True),
        (OP.ENDSWITH, "House", "Ho", False),
        (OP.REGEX, "Tree-42", r"\d+$", True),
        (OP.REGEX, "Tree", r"^\d", False),
        (OP.IS_NULL, None, None, True),
        (OP.IS_NOT_NULL, 0, None, True),
    ],
)
def test_default_predicates(registry, op, field_value, expected, result):
    assert registry.resolve(op)(field_value, expected) is result


@pytest.mark.parametrize(
    ("op", "pattern"),
    [
        (OP.STARTSWITH, "Li"),
        (OP.ENDSWITH, "ght"),
        (OP.CONTAINS, "igh"),
        (OP.ICONTAINS, "LIGHT"),
        (OP.REGEX, "^Light$"),
    ],
)
def test_text_predicates_read_enum_values(registry, op, pattern):
    assert registry.resolve(op)(Shade.LIGHT, pattern) is True
    assert registry.resolve(op)(Shade.DARK, pattern) is False


def test_text_predicates_accept_enum_patterns(registry):
    assert registry.resolve(OP.STARTSWITH)("Light blue", Shade.LIGHT) is True


def test_default_registry_covers_every_operator(registry):
    assert registry.supported == frozenset(AttributeOperator)


def test_fresh_registry_per_call(registry):
    assert build_default_registry() is not registry


def test_empty_registry_resolves_nothing():
    empty = OperatorRegistry()
    assert OP.EQ not in empty
    with pytest.raises(OperatorNotFoundError):
        empty.resolve(OP.EQ)


def test_register_accepts_symbols(registry):
    registry.register("=", lambda a, b: str(a).lower() == str(b).lower())
    assert registry.resolve(OP.EQ)("GREEN", "green") is True


def test_register_rejects_unknown_symbols(registry):
    with pytest.raises(OperatorNotFoundError) as exc_info:
        registry.register("~=", lambda a, b: True)
    assert exc_info.value.operator == "~="


def test_operator_parse_is_case_insensitive():
    assert AttributeOperator.parse("StartsWith") is OP.STARTSWITH
    assert AttributeOperator.parse(OP.GT) is OP.GT


def test_registration_is_logged(caplog: pytest.LogCaptureFixture):
    with caplog.at_level(logging.DEBUG, logger="ocp_attributes.registry"):
        OperatorRegistry().register(OP.REGEX, lambda a, b: True)
    assert any("'regex'" in rec.getMessage() for rec in caplog.records)


def test_between_requires_a_pair(registry):
    with pytest.raises(ValueError, match="low, high"):
        registry.resolve(OP.BETWEEN)(3, 5)


def test_ordering_against_incomparable_values_raises(registry):
    with pytest.raises(TypeError):
        registry.resolve(OP.GT)("abc", 3)

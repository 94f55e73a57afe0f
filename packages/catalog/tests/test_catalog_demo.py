from __future__ import annotations

import io
import logging

import pytest

from ocp_catalog import demo
from ocp_catalog.demo import configure_logging, main, run_demo, sample_products


@pytest.fixture
def root_logger():
    """Restore the root logger's handlers and level after the test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    root.handlers.clear()
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_sample_products():
    assert [p.name for p in sample_products()] == ["Apple", "Tree", "House"]


def test_run_demo_output():
    out = io.StringIO()
    run_demo(out)
    assert out.getvalue().splitlines() == [
        "Green products:",
        " - Apple is green",
        " - Tree is green",
        "Large products:",
        " - Tree is large",
        " - House is large",
        "Large blue items:",
        " - House is big and blue",
        "Not green products:",
        " - House is not green",
    ]


def test_main_returns_zero(monkeypatch: pytest.MonkeyPatch):
    levels: list[str] = []
    monkeypatch.setattr(demo, "configure_logging", levels.append)
    out = io.StringIO()
    assert main(["--log-level", "debug"], out=out) == 0
    assert levels == ["DEBUG"]
    assert "Large blue items:" in out.getvalue()


def test_configure_logging_sets_root_level(root_logger: logging.Logger):
    configure_logging("info")
    assert root_logger.level == logging.INFO
    assert root_logger.handlers


def test_main_rejects_unknown_log_level():
    with pytest.raises(SystemExit):
        main(["--log-level", "LOUD"], out=io.StringIO())

"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import networkx as nx
import pytest

from kspath.algorithms.ksp import yen_k_shortest_paths
from kspath.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    """Reset logging state before and after each test to avoid cross-test bleed."""
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """INFO by default, DEBUG after enable, back to INFO after disable."""
    logger = get_logger("kspath.test")

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.info("info-1")
    assert "info-1" in capture.getvalue()

    logger.debug("debug-1")
    assert "debug-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()


def test_global_level_propagates_to_children():
    logger1 = get_logger("kspath.module1")
    assert logger1.getEffectiveLevel() == logging.INFO

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert get_logger("kspath.module2").getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    setup_root_logger(handler=logging.StreamHandler(capture))
    setup_root_logger(handler=logging.StreamHandler(StringIO()))
    root = logging.getLogger("kspath")
    assert len(root.handlers) == 1

    get_logger("kspath.x").info("hello")
    assert "hello" in capture.getvalue()
    assert "kspath.x - INFO - hello" in capture.getvalue()


def test_search_emits_debug_records(caplog):
    g = nx.DiGraph()
    g.add_edge("A", "B", weight=1)
    g.add_edge("B", "C", weight=1)
    g.add_edge("A", "C", weight=3)

    caplog.set_level(logging.DEBUG, logger="kspath.algorithms.ksp")
    yen_k_shortest_paths(g, -1, float("inf"), "A", "C")
    messages = [r.getMessage() for r in caplog.records if r.name == "kspath.algorithms.ksp"]
    assert any("Accepted path 2" in m for m in messages)
    assert any("exhausted" in m for m in messages)


def test_reset_then_get_logger_reinstalls_single_handler():
    root = logging.getLogger("kspath")
    assert root.handlers == []

    get_logger("kspath.algorithms.ksp")
    get_logger("kspath.algorithms.spf")
    assert len(root.handlers) == 1
    assert root.level == logging.INFO

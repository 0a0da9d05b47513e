"""Shared pytest fixtures for fnkit tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest

from fnkit.domain.checker import Checker
from fnkit.domain.rules import is_map, make_key_presence_rule, make_rule


@pytest.fixture
def command_checker() -> Checker:
    """Checker for a command map that needs ``msg`` and ``type`` keys."""
    return Checker(
        [
            make_rule("must be a map", is_map),
            make_key_presence_rule(["msg", "type"]),
        ]
    )


@pytest.fixture
def restore_fnkit_logger() -> Generator[logging.Logger]:
    """Restore the ``fnkit`` logger's handlers, level, and propagation after a test."""
    fnkit_logger = logging.getLogger("fnkit")
    original_handlers = fnkit_logger.handlers[:]
    original_level = fnkit_logger.level
    original_propagate = fnkit_logger.propagate
    yield fnkit_logger
    fnkit_logger.handlers = original_handlers
    fnkit_logger.setLevel(original_level)
    fnkit_logger.propagate = original_propagate

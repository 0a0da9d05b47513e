"""Tests for structlog rendering of fnkit events."""

from __future__ import annotations

import io
import json
import logging

import pytest

from fnkit.config.logging import HANDLER_NAME, configure_logging
from fnkit.config.models import LoggingConfig
from fnkit.domain.checker import Checker, check, checker
from fnkit.domain.rules import make_rule

pytestmark = pytest.mark.usefixtures("restore_fnkit_logger")


def _events(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line]


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(LoggingConfig(verbose=True), stream=io.StringIO())
        assert logging.getLogger("fnkit").level == logging.DEBUG

    def test_default_is_warning(self) -> None:
        configure_logging(stream=io.StringIO())
        assert logging.getLogger("fnkit").level == logging.WARNING

    def test_root_logger_untouched(self) -> None:
        root = logging.getLogger()
        handlers_before = root.handlers[:]
        level_before = root.level
        configure_logging(LoggingConfig(verbose=True, log_json=True), stream=io.StringIO())
        assert root.handlers == handlers_before
        assert root.level == level_before

    def test_reconfigure_replaces_handler(self) -> None:
        configure_logging(stream=io.StringIO())
        configure_logging(LoggingConfig(log_json=True), stream=io.StringIO())
        named = [h for h in logging.getLogger("fnkit").handlers if h.get_name() == HANDLER_NAME]
        assert len(named) == 1

    def test_human_mode_output(self) -> None:
        out = io.StringIO()
        configure_logging(LoggingConfig(verbose=True), stream=out)
        check([make_rule("positive", lambda n: n > 0)], -1)
        text = out.getvalue()
        assert "check.completed" in text
        assert "failed=1" in text


class TestCheckerEvents:
    def test_check_completed_fields(self) -> None:
        out = io.StringIO()
        configure_logging(LoggingConfig(verbose=True, log_json=True), stream=out)
        check_positive = checker(
            make_rule("must be positive", lambda n: n > 0),
            make_rule("must be even", lambda n: n % 2 == 0),
        )
        out.truncate(0)
        out.seek(0)

        assert check_positive(-1) == ["must be positive", "must be even"]

        (event,) = _events(out)
        assert event["event"] == "check.completed"
        assert event["rules"] == 2
        assert event["failed"] == 2
        assert event["level"] == "debug"
        assert event["logger"] == "fnkit.domain.checker"
        assert "timestamp" in event

    def test_checker_built_event(self) -> None:
        out = io.StringIO()
        configure_logging(LoggingConfig(verbose=True, log_json=True), stream=out)
        Checker([make_rule("a", lambda v: True)])
        (event,) = _events(out)
        assert event["event"] == "checker.built"
        assert event["rules"] == 1

    def test_rejected_rule_logged_as_warning(self) -> None:
        out = io.StringIO()
        configure_logging(LoggingConfig(log_json=True), stream=out)
        with pytest.raises(ValueError):
            Checker([make_rule("a", lambda v: True), "not a rule"])  # type: ignore[list-item]
        (event,) = _events(out)
        assert event["event"] == "rule.rejected"
        assert event["level"] == "warning"
        assert event["position"] == 1
        assert event["kind"] == "str"

    def test_debug_suppressed_when_not_verbose(self) -> None:
        out = io.StringIO()
        configure_logging(LoggingConfig(log_json=True), stream=out)
        checker(make_rule("must be positive", lambda n: n > 0))(-1)
        assert out.getvalue() == ""

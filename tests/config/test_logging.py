"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from dtlfmt.config.logging import configure_logging
from dtlfmt.domain.parser import parse


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    dtl = logging.getLogger("dtlfmt")
    dtl_level = dtl.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    dtl.setLevel(dtl_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("dtlfmt").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("dtlfmt").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("dtlfmt.test")
        log.warning("json test", answer=42)
        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "dtlfmt.test"
        assert "timestamp" in parsed

    def test_parser_debug_records(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        parse("junk|Rule|a|equals|1")
        captured = capfd.readouterr()
        events = [json.loads(line) for line in captured.err.strip().splitlines()]
        assert all(e["logger"] == "dtlfmt.domain.parser" for e in events)
        assert any("Skipping unrecognized token" in e["event"] for e in events)
        assert any(e["event"].startswith("Parsed 1 rule(s)") for e in events)

    def test_parser_quiet_without_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        parse("Rule|a|equals|1")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

"""Shared pytest fixtures for dtlfmt tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dtlfmt.config.settings import DtlSettings
from dtlfmt.services.rules import RuleService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory with no dtlfmt env vars set.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` so a stray
    ``dtlfmt.toml`` or ``DTLFMT_*`` variable never leaks into a test.
    """
    for name in ("DTLFMT_CONFIG", "DTLFMT_STRICT", "DTLFMT_PARSER__STRICT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings(_isolated_config: None, tmp_path: Path) -> DtlSettings:
    """Default settings with no TOML file."""
    return DtlSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def service(settings: DtlSettings) -> RuleService:
    """RuleService over default settings."""
    return RuleService(settings)

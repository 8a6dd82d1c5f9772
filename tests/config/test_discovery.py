"""Tests for config file discovery and TOML reading."""

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from dtlfmt.config.discovery import CONFIG_FILENAME, find_config, read_toml
from dtlfmt.config.models import EditorConfig


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("DTLFMT_CONFIG", raising=False)


class TestFindConfig:
    def test_finds_in_current_dir(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[parser]\nstrict = true\n")
        assert find_config(tmp_path) == config_file

    def test_walks_up(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        child = tmp_path / "a" / "b" / "c"
        child.mkdir(parents=True)
        assert find_config(child) == config_file

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        child = tmp_path / "empty"
        child.mkdir()
        assert find_config(child) is None

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        config_file = tmp_path / "custom.toml"
        config_file.write_text("")
        monkeypatch.setenv("DTLFMT_CONFIG", str(config_file))
        assert find_config(tmp_path / "elsewhere") == config_file

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv("DTLFMT_CONFIG", str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestReadToml:
    def test_reads_sections(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text(
            '[parser]\nstrict = true\n[editor]\ndefault_clause_operator = "or"\n'
        )
        data = read_toml(config_file)
        assert data == {"parser": {"strict": True}, "editor": {"default_clause_operator": "or"}}
        editor = EditorConfig.model_validate(data["editor"])
        assert editor.default_clause_operator == "OR"
        assert editor.default_rule_operator == "OR"

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("")
        assert read_toml(config_file) == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text("[editor\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            read_toml(config_file)

    def test_invalid_operator_rejected(self, tmp_path: Path) -> None:
        config_file = tmp_path / CONFIG_FILENAME
        config_file.write_text('[editor]\ndefault_rule_operator = "XOR"\n')
        with pytest.raises(ValidationError):
            EditorConfig.model_validate(read_toml(config_file)["editor"])

"""DtlSettings: one frozen object built from flags, env vars, and TOML.

Highest priority first:

* keyword arguments (the root CLI group passes its flags here)
* ``DTLFMT_*`` environment variables, ``__`` separating nested keys
* the discovered ``dtlfmt.toml``
* defaults on the section models in :mod:`dtlfmt.config.models`
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dtlfmt.config.discovery import find_config, read_toml
from dtlfmt.config.models import EditorConfig, ParserConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Settings source backed by a single TOML document."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = (
            read_toml(toml_path) if toml_path is not None and toml_path.is_file() else {}
        )

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._data.get(field_name), field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# pydantic-settings builds sources from a classmethod, so the path chosen
# by from_cli() is handed over per thread.
_pending = threading.local()


class DtlSettings(BaseSettings):
    """Everything a dtlfmt invocation is configured with.

    The root CLI group builds one instance and hands it to
    :class:`~dtlfmt.commands._context.AppContext`.

    Attributes:
        config_path: The TOML file that was read, or None.
        strict: ``--strict``/``--lenient``; None defers to ``[parser] strict``.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DTLFMT_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # Output and logging flags
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    strict: bool | None = None

    # dtlfmt.toml sections
    parser: ParserConfig = Field(default_factory=ParserConfig)
    editor: EditorConfig = Field(default_factory=EditorConfig)

    @property
    def strict_parsing(self) -> bool:
        """Whether the parser should reject tokens instead of skipping them."""
        return self.parser.strict if self.strict is None else self.strict

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_pending, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        search_root: Path | None = None,
        **cli_flags: Any,
    ) -> DtlSettings:
        """Build settings for one CLI run.

        An explicit *config_path* that does not exist is ignored; without
        one, ``dtlfmt.toml`` is searched for upward from *search_root*.
        """
        if config_path:
            explicit = Path(config_path)
            toml_path = explicit if explicit.is_file() else None
        else:
            toml_path = find_config(search_root)

        _pending.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        finally:
            _pending.toml_path = None

"""Locate and read ``dtlfmt.toml``.

The lookup order is ``$DTLFMT_CONFIG`` first, then the nearest
``dtlfmt.toml`` in the search directory or any of its parents.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "dtlfmt.toml"
CONFIG_ENV_VAR = "DTLFMT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd).

    A ``DTLFMT_CONFIG`` pointing at a missing file disables discovery
    rather than falling through to the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        pinned = Path(override)
        return pinned if pinned.is_file() else None

    directory = (start or Path.cwd()).resolve()
    for candidate_dir in (directory, *directory.parents):
        candidate = candidate_dir / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML, reporting syntax errors as a CLI failure."""
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc

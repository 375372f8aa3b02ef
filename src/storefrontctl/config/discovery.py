"""Locating and reading ``storefrontctl.toml``.

Lookup order: the ``-c/--config`` flag, then ``STOREFRONTCTL_CONFIG``, then
the nearest ``storefrontctl.toml`` in the working directory or its parents.
The directory holding the file becomes the project root, which is where
``.storefrontctl/templates/`` overrides and relative store paths are
resolved.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

from storefrontctl.config.models import StorefrontConfig

CONFIG_FILENAME = "storefrontctl.toml"
CONFIG_ENV_VAR = "STOREFRONTCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Nearest ``storefrontctl.toml`` at or above *start* (default: cwd).

    A set ``STOREFRONTCTL_CONFIG`` short-circuits the search; if it names a
    missing file the result is None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(config_path: str | Path | None, start: Path | None = None) -> Path | None:
    """The config file a CLI invocation runs with.

    An explicit *config_path* is used only if it exists and never falls
    back to discovery.
    """
    if config_path:
        p = Path(config_path)
        return p if p.is_file() else None
    return find_config(start)


def project_root_for(toml_path: Path | None) -> Path:
    """Directory that owns *toml_path*, or the cwd without a config file."""
    return toml_path.parent if toml_path else Path.cwd()


def read_config_file(path: Path) -> dict[str, Any]:
    """Parse *path* as TOML.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise click.ClickException(f"Invalid TOML in {path}: {exc}") from exc


def load_config(path: Path | None = None, cwd: Path | None = None) -> StorefrontConfig:
    """Validated ``[render]``/``[migrate]`` sections; defaults without a file."""
    if path is None:
        path = find_config(cwd)
    if path is None:
        return StorefrontConfig()
    return StorefrontConfig.model_validate(read_config_file(path))

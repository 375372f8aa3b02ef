"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs   -- CLI flags passed by Click
  2. Env vars      -- ``STOREFRONTCTL_*`` prefix, ``__`` for nested sections
  3. TOML file     -- ``storefrontctl.toml`` discovered via walk-up
  4. Code defaults -- baked into the section models
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from storefrontctl.config.discovery import project_root_for, read_config_file, resolve_config_path
from storefrontctl.config.models import MigrateConfig, RenderConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``storefrontctl.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_config_file(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class StorefrontSettings(BaseSettings):
    """Settings for the whole CLI, frozen after construction.

    Stored on ``click.Context.obj`` (via AppContext) at the CLI root.

    Attributes:
        project_root: Parent of ``storefrontctl.toml``, or CWD if none found.
            Template overrides are looked up under
            ``<project_root>/.storefrontctl/templates/``.
        config_path: The TOML file in effect, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "STOREFRONTCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    render: RenderConfig = Field(default_factory=RenderConfig)
    migrate: MigrateConfig = Field(default_factory=MigrateConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> StorefrontSettings:
        """Construct settings from a CLI invocation.

        Uses the explicit *config_path* when given, otherwise walk-up
        discovery from *project_root*.  CLI flags win over everything.
        """
        toml_path = resolve_config_path(config_path, project_root)
        resolved_root = project_root if project_root is not None else project_root_for(toml_path)

        _tls.toml_path = toml_path
        try:
            return cls(
                project_root=resolved_root,
                config_path=toml_path,
                **cli_flags,
            )
        finally:
            _tls.toml_path = None

"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``storefrontctl.toml`` only holds
overrides.  An empty file (or no file at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.presets import DEFAULT_TEMPLATE_ID, normalize_template_id

# --- storefrontctl.toml sections ---


class RenderConfig(BaseModel):
    """[render] section."""

    model_config = {"frozen": True}

    default_breakpoint: Breakpoint = Breakpoint.DESKTOP
    default_template: str = DEFAULT_TEMPLATE_ID
    apply_presets: bool = True
    edit_mode: bool = False

    @field_validator("default_template")
    @classmethod
    def _normalize_template(cls, value: str) -> str:
        return normalize_template_id(value)


class MigrateConfig(BaseModel):
    """[migrate] section."""

    model_config = {"frozen": True}

    backup: bool = True
    indent: int = Field(default=2, ge=0, le=8)


class StorefrontConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    render: RenderConfig = Field(default_factory=RenderConfig)
    migrate: MigrateConfig = Field(default_factory=MigrateConfig)

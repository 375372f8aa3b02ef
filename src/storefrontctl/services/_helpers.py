"""Shared service-layer helper functions."""

from __future__ import annotations

import dataclasses
from typing import Any

from storefrontctl.domain.breakpoints import Breakpoint, breakpoint_for_width, coerce_breakpoint
from storefrontctl.domain.presets import ThemePreset, apply_theme_preset, preset_for_template
from storefrontctl.domain.registry import SettingsPanel, TemplateMetadata, panel_fields


def choose_breakpoint(
    explicit: Breakpoint | str | None,
    width: float | None,
    default: Breakpoint,
) -> Breakpoint:
    """An explicit breakpoint wins, then a container width, then *default*.

    Examples:
        >>> choose_breakpoint(None, 700, Breakpoint.DESKTOP)
        <Breakpoint.TABLET: 'tablet'>
        >>> choose_breakpoint("mobile", 1200, Breakpoint.DESKTOP)
        <Breakpoint.MOBILE: 'mobile'>
    """
    if explicit:
        return coerce_breakpoint(explicit)
    if width is not None:
        return breakpoint_for_width(width)
    return default


def prepare_settings(
    raw_settings: dict[str, Any],
    template_id: str,
    *,
    apply_presets: bool,
) -> tuple[dict[str, Any], ThemePreset | None]:
    """Raw settings with the template's theme preset filled in, if enabled."""
    if not apply_presets:
        return dict(raw_settings), None
    preset = preset_for_template(template_id)
    return apply_theme_preset(raw_settings, preset), preset


def panel_to_dict(panel: SettingsPanel) -> dict[str, Any]:
    return {
        "id": panel.id,
        "title": panel.title,
        "categories": list(panel.categories),
        "fields": [spec.name for spec in panel_fields(panel)],
    }


def template_to_dict(template: TemplateMetadata) -> dict[str, Any]:
    """Serializable view of a registry entry, including its component name."""
    out = dataclasses.asdict(template)
    out["component"] = template.component
    return out

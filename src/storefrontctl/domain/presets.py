"""Theme presets and template id normalization.

A preset is a bundle of raw settings (colors, fonts, spacing) that gives a
template its default look.  Presets never override a store's own values:
:func:`apply_theme_preset` fills only keys the store left absent or blank.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE_ID: Final = "fashion"
DEFAULT_PRESET_ID: Final = "minimal"

# Stores created before the template rename saved ids like ``gold-fashion``.
LEGACY_TEMPLATE_PREFIX: Final = "gold-"


@dataclass(frozen=True)
class ThemePreset:
    """A named set of raw settings values."""

    id: str
    name: str
    category: str
    description: str = ""
    styles: Mapping[str, Any] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def settings(self) -> dict[str, Any]:
        """Styles and defaults merged into one raw-settings mapping."""
        return {**self.defaults, **self.styles}


def _styles(
    primary: str,
    accent: str,
    background: str,
    text: str,
    heading_font: str,
    body_font: str,
    *,
    radius: int,
    columns: int,
    gap: int = 16,
    spacing: int = 40,
) -> dict[str, Any]:
    return {
        "primary_color": primary,
        "accent_color": accent,
        "background_color": background,
        "text_color": text,
        "heading_font_family": heading_font,
        "font_family": body_font,
        "border_radius": radius,
        "grid_columns": columns,
        "grid_gap": gap,
        "section_padding": spacing,
    }


THEME_PRESETS: Final[tuple[ThemePreset, ...]] = (
    ThemePreset(
        "minimal", "Minimal", "general", "Clean black and white",
        _styles("#000000", "#3B82F6", "#FFFFFF", "#111111", "Inter", "Inter", radius=8, columns=4),
    ),
    ThemePreset(
        "fashion-dark", "Fashion Dark", "fashion", "Bold orange on near-black",
        _styles("#F97316", "#FED7AA", "#09090F", "#F0F0F0", "Playfair Display", "Inter",
                radius=0, columns=3),
        {"enable_dark_mode": True},
    ),
    ThemePreset(
        "fashion-light", "Fashion Light", "fashion", "Editorial serif with gold accents",
        _styles("#1A1A1A", "#D4AF37", "#FAFAFA", "#1A1A1A", "Cormorant Garamond", "Lato",
                radius=0, columns=3),
    ),
    ThemePreset(
        "baby-soft", "Baby Soft", "baby", "Rounded pastel pinks",
        _styles("#EC4899", "#F9A8D4", "#FFF5F7", "#4A1A2C", "Quicksand", "Nunito",
                radius=16, columns=3, gap=24, spacing=48),
    ),
    ThemePreset(
        "baby-neutral", "Baby Neutral", "baby", "Warm earthy neutrals",
        _styles("#8B7355", "#D4C4B5", "#FAF8F5", "#3D3D3D", "Poppins", "Open Sans",
                radius=12, columns=3, gap=24, spacing=48),
    ),
    ThemePreset(
        "tech-dark", "Tech Dark", "electronics", "Neon cyan on slate",
        _styles("#00D4FF", "#7C3AED", "#0F172A", "#E2E8F0", "Space Grotesk", "Inter",
                radius=12, columns=4),
        {"enable_dark_mode": True},
    ),
    ThemePreset(
        "tech-minimal", "Tech Minimal", "electronics", "Light and precise",
        _styles("#111827", "#2563EB", "#FFFFFF", "#111827", "Inter", "Inter", radius=6, columns=4),
    ),
    ThemePreset(
        "cafe-warm", "Cafe Warm", "food", "Coffee browns and amber",
        _styles("#78350F", "#F59E0B", "#FFFBEB", "#451A03", "Merriweather", "Source Sans Pro",
                radius=12, columns=3, gap=20, spacing=48),
    ),
    ThemePreset(
        "restaurant-dark", "Restaurant Dark", "food", "Candle-lit dining",
        _styles("#DC2626", "#FBBF24", "#1C1917", "#F5F5F4", "Playfair Display", "Lato",
                radius=4, columns=3),
        {"enable_dark_mode": True},
    ),
    ThemePreset(
        "jewelry-gold", "Jewelry Gold", "jewelry", "Gold on ivory",
        _styles("#B8860B", "#FFD700", "#FFFEF7", "#1A1A1A", "Cormorant Garamond", "Montserrat",
                radius=0, columns=4, gap=24, spacing=56),
    ),
    ThemePreset(
        "jewelry-dark", "Jewelry Dark", "jewelry", "Gold on black velvet",
        _styles("#D4AF37", "#F5E6B3", "#0A0A0A", "#F5F5F5", "Cormorant Garamond", "Montserrat",
                radius=0, columns=4, gap=24, spacing=56),
        {"enable_dark_mode": True},
    ),
    ThemePreset(
        "furniture-scandinavian", "Scandinavian", "furniture", "Airy navy and slate",
        _styles("#1E3A5F", "#64748B", "#F8FAFC", "#1E293B", "DM Sans", "Inter",
                radius=4, columns=3, gap=24, spacing=64),
    ),
    ThemePreset(
        "beauty-pink", "Beauty Pink", "beauty", "Rosy and elegant",
        _styles("#DB2777", "#F9A8D4", "#FDF2F8", "#831843", "Playfair Display", "Lato",
                radius=16, columns=4),
    ),
    ThemePreset(
        "beauty-minimal", "Beauty Minimal", "beauty", "Soft nude tones",
        _styles("#A16207", "#FDE68A", "#FFFDF7", "#292524", "Jost", "Jost", radius=8, columns=4),
    ),
    ThemePreset(
        "perfume-luxury", "Perfume Luxury", "perfume", "Deep plum with gold",
        _styles("#4C1D95", "#C9A227", "#FAF5FF", "#1E1B4B", "Cinzel", "Raleway",
                radius=2, columns=3, gap=24, spacing=56),
    ),
    ThemePreset(
        "bags-classic", "Bags Classic", "bags", "Saddle leather browns",
        _styles("#7C2D12", "#D6A77A", "#FFF8F1", "#292524", "Libre Baskerville", "Karla",
                radius=6, columns=3),
    ),
)

_PRESETS_BY_ID: Final[dict[str, ThemePreset]] = {p.id: p for p in THEME_PRESETS}

_TEMPLATE_PRESETS: Final[dict[str, str]] = {
    "fashion": "fashion-dark",
    "fashion2": "fashion-dark",
    "fashion3": "fashion-light",
    "bags": "bags-classic",
    "baby": "baby-soft",
    "electronics": "tech-dark",
    "food": "restaurant-dark",
    "cafe": "cafe-warm",
    "jewelry": "jewelry-gold",
    "beauty": "beauty-pink",
    "perfume": "perfume-luxury",
    "furniture": "furniture-scandinavian",
}


def normalize_template_id(raw: Any, default: str = DEFAULT_TEMPLATE_ID) -> str:
    """Canonical template id: trimmed, lower-cased, legacy prefix removed."""
    if not isinstance(raw, str):
        return default
    value = raw.strip().lower()
    if value.startswith(LEGACY_TEMPLATE_PREFIX):
        value = value[len(LEGACY_TEMPLATE_PREFIX):]
    return value or default


def get_preset(preset_id: str) -> ThemePreset | None:
    return _PRESETS_BY_ID.get(preset_id)


def presets_by_category(category: str) -> list[ThemePreset]:
    return [p for p in THEME_PRESETS if p.category == category]


def preset_for_template(template_id: Any) -> ThemePreset:
    """The preset a template starts from; unknown templates get ``minimal``."""
    tid = normalize_template_id(template_id)
    preset = _PRESETS_BY_ID.get(_TEMPLATE_PRESETS.get(tid, DEFAULT_PRESET_ID))
    if preset is None:
        logger.debug("No preset for template %r, using %s", tid, DEFAULT_PRESET_ID)
        preset = _PRESETS_BY_ID[DEFAULT_PRESET_ID]
    return preset


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def apply_theme_preset(raw_settings: Any, preset: ThemePreset) -> dict[str, Any]:
    """Return new raw settings with *preset* filling the blanks.

    Store values always win.  The input mapping is left untouched.
    """
    merged: dict[str, Any] = dict(raw_settings) if isinstance(raw_settings, Mapping) else {}
    for key, value in preset.settings().items():
        if _is_blank(merged.get(key)):
            merged[key] = value
    return merged

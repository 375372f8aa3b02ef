"""Universal template data: one standardized field set for every template.

Raw store settings have grown historically (``banner_url`` vs
``template_hero_image``, JSON strings vs lists, ...).  The adapter maps them
onto a fixed set of universal fields so that any storefront template renders
from the same logical data without template-specific branching.

The mapping lives in exactly one place, :data:`UNIVERSAL_FIELDS`.  Adding a
row there makes the field available to every template and to the editor.

INVARIANT: :func:`build_universal_data` never leaves a documented field
unset, whatever the raw settings look like.
"""

from __future__ import annotations

import copy
import json
import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from storefrontctl.domain.paths import settings_edit_path

logger = logging.getLogger(__name__)


class FieldKind(StrEnum):
    """Editor input type; also selects how the raw value is coerced."""

    TEXT = "text"
    TEXTAREA = "textarea"
    URL = "url"
    COLOR = "color"
    NUMBER = "number"
    BOOLEAN = "boolean"
    JSON = "json"
    CHOICE = "choice"


_TEXTUAL = frozenset({FieldKind.TEXT, FieldKind.TEXTAREA, FieldKind.URL, FieldKind.COLOR})


class UnknownFieldError(KeyError):
    """Raised for a field name that is not part of the universal schema."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown universal field: {self.name!r}"


@dataclass(frozen=True)
class UniversalField:
    """One row of the universal field table."""

    name: str
    settings_key: str
    default: Any
    kind: FieldKind
    label: str
    category: str
    fallback_keys: tuple[str, ...] = ()
    choices: tuple[str, ...] = ()
    integer: bool = False
    editable: bool = True

    @property
    def alias(self) -> str:
        return to_camel(self.name)

    @property
    def edit_path(self) -> str:
        return settings_edit_path(self.settings_key)

    def default_value(self) -> Any:
        if callable(self.default):
            return self.default()
        return copy.deepcopy(self.default)


def _copyright_default() -> str:
    return f"© {datetime.now(UTC).year} All rights reserved."


def _f(
    name: str,
    settings_key: str,
    default: Any,
    kind: FieldKind,
    label: str,
    category: str,
    *fallback_keys: str,
    choices: tuple[str, ...] = (),
    integer: bool = False,
    editable: bool = True,
) -> UniversalField:
    return UniversalField(
        name=name,
        settings_key=settings_key,
        default=default,
        kind=kind,
        label=label,
        category=category,
        fallback_keys=fallback_keys,
        choices=choices,
        integer=integer,
        editable=editable,
    )


K = FieldKind

UNIVERSAL_FIELDS: Final[tuple[UniversalField, ...]] = (
    # Store info
    _f("store_name", "store_name", "My Store", K.TEXT, "Store Name", "Store Info"),
    _f("store_description", "store_description", "Welcome to our store", K.TEXTAREA, "Store Description", "Store Info"),
    _f("store_logo", "store_logo", "", K.URL, "Store Logo", "Store Info", "logo_url"),
    _f("store_favicon", "store_favicon", "", K.URL, "Favicon", "Store Info"),
    # Header
    _f("header_tagline", "template_header_tagline", "Quality products, delivered fast", K.TEXT, "Header Tagline", "Header"),
    _f("header_nav_items", "template_header_nav", ["Home", "Shop", "About", "Contact"], K.JSON, "Header Navigation", "Header", editable=False),
    _f("header_cta_text", "template_header_cta_text", "Shop Now", K.TEXT, "Header CTA Text", "Header", "template_button_text"),
    _f("header_cta_link", "template_header_cta_link", "#products", K.URL, "Header CTA Link", "Header"),
    # Hero
    _f("hero_kicker", "template_hero_kicker", "New Collection", K.TEXT, "Hero Kicker", "Hero"),
    _f("hero_title", "template_hero_heading", "Discover Our Latest Products", K.TEXT, "Hero Title", "Hero"),
    _f("hero_subtitle", "template_hero_subtitle", "Shop the best selection of quality products at great prices.", K.TEXTAREA, "Hero Subtitle", "Hero"),
    _f("hero_image", "banner_url", "", K.URL, "Hero Image", "Hero", "template_hero_image"),
    _f("hero_image_alt", "template_hero_image_alt", "Hero image", K.TEXT, "Hero Image Alt Text", "Hero", editable=False),
    _f("hero_image_scale", "template_hero_image_scale", 1, K.NUMBER, "Hero Image Scale", "Hero"),
    _f("hero_image_zoom", "hero_image_zoom", 1, K.NUMBER, "Hero Image Zoom", "Hero"),
    _f("hero_image_position_x", "template_hero_image_pos_x", 0.5, K.NUMBER, "Hero Image X Position", "Hero"),
    _f("hero_image_position_y", "template_hero_image_pos_y", 0.5, K.NUMBER, "Hero Image Y Position", "Hero"),
    _f("hero_video", "hero_video_url", "", K.URL, "Hero Video URL", "Hero", "template_hero_video_url"),
    _f("hero_video_autoplay", "template_hero_video_autoplay", True, K.BOOLEAN, "Autoplay Video", "Hero"),
    _f("hero_video_loop", "template_hero_video_loop", True, K.BOOLEAN, "Loop Video", "Hero"),
    _f("hero_cta_text", "template_button_text", "Shop Now", K.TEXT, "Hero CTA Text", "Hero"),
    _f("hero_cta_link", "template_button_link", "#products", K.URL, "Hero CTA Link", "Hero"),
    _f("hero_secondary_cta_text", "template_secondary_cta", "Learn More", K.TEXT, "Secondary CTA Text", "Hero"),
    _f("hero_secondary_cta_link", "template_secondary_cta_link", "#about", K.URL, "Secondary CTA Link", "Hero"),
    # Colors
    _f("primary_color", "primary_color", "#1F2937", K.COLOR, "Primary Color", "Colors"),
    _f("secondary_color", "secondary_color", "#F3F4F6", K.COLOR, "Secondary Color", "Colors"),
    _f("accent_color", "accent_color", "#3B82F6", K.COLOR, "Accent Color", "Colors", "template_accent_color"),
    _f("text_color", "text_color", "#111827", K.COLOR, "Text Color", "Colors"),
    _f("secondary_text_color", "secondary_text_color", "#6B7280", K.COLOR, "Secondary Text Color", "Colors"),
    _f("background_color", "background_color", "#FFFFFF", K.COLOR, "Background Color", "Colors"),
    # Typography
    _f("font_family", "font_family", "Inter", K.TEXT, "Font Family", "Typography"),
    _f("heading_font_family", "heading_font_family", "Inter", K.TEXT, "Heading Font", "Typography", "font_family"),
    _f("font_size", "body_font_size", 16, K.NUMBER, "Base Font Size", "Typography"),
    _f("heading_size_multiplier", "heading_size_multiplier", 1, K.NUMBER, "Heading Size Multiplier", "Typography"),
    # Layout
    _f("border_radius", "border_radius", 8, K.NUMBER, "Border Radius", "Layout"),
    _f("section_padding", "section_padding", 40, K.NUMBER, "Section Padding", "Layout"),
    _f("card_padding", "card_padding", 16, K.NUMBER, "Card Padding", "Layout"),
    _f("grid_columns", "grid_columns", 4, K.NUMBER, "Grid Columns", "Layout", integer=True),
    _f("grid_gap", "grid_gap", 16, K.NUMBER, "Grid Gap", "Layout"),
    # Effects
    _f("enable_animations", "enable_animations", True, K.BOOLEAN, "Enable Animations", "Effects"),
    _f("enable_shadows", "enable_shadows", True, K.BOOLEAN, "Enable Shadows", "Effects", "show_product_shadows"),
    _f("enable_dark_mode", "enable_dark_mode", False, K.BOOLEAN, "Dark Mode", "Effects"),
    _f("enable_parallax", "enable_parallax", False, K.BOOLEAN, "Parallax Effect", "Effects"),
    # Featured
    _f("featured_title", "template_featured_title", "Featured Products", K.TEXT, "Featured Section Title", "Featured"),
    _f("featured_subtitle", "template_featured_subtitle", "Our most popular items", K.TEXT, "Featured Section Subtitle", "Featured"),
    _f("show_featured_section", "show_featured_section", True, K.BOOLEAN, "Show Featured Section", "Featured"),
    _f("featured_product_ids", "featured_product_ids", [], K.JSON, "Featured Products", "Featured", editable=False),
    # Testimonials
    _f("show_testimonials", "show_testimonials", False, K.BOOLEAN, "Show Testimonials", "Testimonials"),
    _f("testimonials_title", "template_testimonials_title", "What Our Customers Say", K.TEXT, "Testimonials Title", "Testimonials"),
    _f("testimonials", "testimonials", [], K.JSON, "Testimonials", "Testimonials", editable=False),
    # Footer
    _f("footer_about", "footer_about", "", K.TEXTAREA, "Footer About Text", "Footer"),
    _f("footer_copyright", "footer_copyright", _copyright_default, K.TEXT, "Copyright Text", "Footer"),
    _f("footer_links", "footer_links", [], K.JSON, "Footer Links", "Footer", editable=False),
    _f("social_links", "social_links", [], K.JSON, "Social Links", "Footer", editable=False),
    # Product display
    _f("product_card_style", "product_card_style", "card", K.CHOICE, "Product Card Style", "Products",
       choices=("card", "tile", "minimal", "detailed"), editable=False),
    _f("product_image_ratio", "product_image_ratio", "square", K.CHOICE, "Product Image Ratio", "Products",
       choices=("square", "portrait", "landscape", "auto"), editable=False),
    _f("show_product_shadows", "show_product_shadows", True, K.BOOLEAN, "Product Shadows", "Products"),
    _f("show_quick_view", "show_quick_view", False, K.BOOLEAN, "Quick View", "Products"),
    _f("buy_button_text", "template_buy_now_label", "Buy Now", K.TEXT, "Buy Button Text", "Products"),
    _f("add_to_cart_text", "template_add_to_cart_label", "Add to Cart", K.TEXT, "Add to Cart Text", "Products"),
)

del K

_FIELDS_BY_NAME: Final[dict[str, UniversalField]] = {
    **{f.alias: f for f in UNIVERSAL_FIELDS},
    **{f.name: f for f in UNIVERSAL_FIELDS},
}


class UniversalTemplateData(BaseModel):
    """Standardized template data.  Serializes with camelCase aliases."""

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    # Store info
    store_name: str
    store_description: str
    store_logo: str
    store_favicon: str
    # Header
    header_tagline: str
    header_nav_items: list[Any]
    header_cta_text: str
    header_cta_link: str
    # Hero
    hero_kicker: str
    hero_title: str
    hero_subtitle: str
    hero_image: str
    hero_image_alt: str
    hero_image_scale: float
    hero_image_zoom: float
    hero_image_position_x: float
    hero_image_position_y: float
    hero_video: str
    hero_video_autoplay: bool
    hero_video_loop: bool
    hero_cta_text: str
    hero_cta_link: str
    hero_secondary_cta_text: str
    hero_secondary_cta_link: str
    # Colors
    primary_color: str
    secondary_color: str
    accent_color: str
    text_color: str
    secondary_text_color: str
    background_color: str
    # Typography
    font_family: str
    heading_font_family: str
    font_size: float
    heading_size_multiplier: float
    # Layout
    border_radius: float
    section_padding: float
    card_padding: float
    grid_columns: int
    grid_gap: float
    # Effects
    enable_animations: bool
    enable_shadows: bool
    enable_dark_mode: bool
    enable_parallax: bool
    # Featured
    featured_title: str
    featured_subtitle: str
    show_featured_section: bool
    featured_product_ids: list[Any]
    # Testimonials
    show_testimonials: bool
    testimonials_title: str
    testimonials: list[Any]
    # Footer
    footer_about: str
    footer_copyright: str
    footer_links: list[Any]
    social_links: list[Any]
    # Product display
    product_card_style: str
    product_image_ratio: str
    show_product_shadows: bool
    show_quick_view: bool
    buy_button_text: str
    add_to_cart_text: str

    raw_settings: dict[str, Any] = {}

    def edit_path(self, name: str) -> str:
        """Shortcut for :func:`get_edit_path`."""
        return get_edit_path(name)


# ── Coercion ──────────────────────────────────────────────────────────


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _coerce_text(value: Any) -> Any:
    if isinstance(value, str):
        return value if value else None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def _coerce_number(value: Any) -> Any:
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    try:
        as_float = float(value)
    except OverflowError:
        return None
    if math.isnan(as_float) or math.isinf(as_float):
        return None
    # Zero counts as unset, matching historical stores that saved 0 for "auto".
    if value == 0:
        return None
    return int(value) if as_float.is_integer() else value


def _coerce_bool(value: Any, default: bool) -> bool:
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("true", "1", "yes", "on"):
            value = True
        elif lowered in ("false", "0", "no", "off"):
            value = False
    # Default-on flags are only disabled by an explicit False and vice versa.
    if default:
        return value is not False
    return value is True


def _coerce_json(value: Any) -> Any:
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except ValueError:
            return None
    if isinstance(value, (list, dict)):
        return copy.deepcopy(value)
    return None


def _coerce(spec: UniversalField, value: Any) -> Any:
    if spec.kind in _TEXTUAL:
        return _coerce_text(value)
    if spec.kind is FieldKind.NUMBER:
        number = _coerce_number(value)
        if number is not None and spec.integer:
            return round(number) or None
        return number
    if spec.kind is FieldKind.JSON:
        parsed = _coerce_json(value)
        if parsed is not None and not isinstance(parsed, type(spec.default_value())):
            return None
        return parsed
    if spec.kind is FieldKind.CHOICE:
        return value if isinstance(value, str) and value in spec.choices else None
    return None


def _resolve_field(spec: UniversalField, settings: Mapping[str, Any]) -> Any:
    if spec.kind is FieldKind.BOOLEAN:
        raw = None
        for key in (spec.settings_key, *spec.fallback_keys):
            if not _is_blank(settings.get(key)):
                raw = settings[key]
                break
        return _coerce_bool(raw, bool(spec.default))

    for key in (spec.settings_key, *spec.fallback_keys):
        raw = settings.get(key)
        if _is_blank(raw):
            continue
        coerced = _coerce(spec, raw)
        if coerced is not None:
            return coerced
        logger.debug("Ignoring unusable value for %s (%s=%r)", spec.name, key, raw)
    return spec.default_value()


# ── Public API ────────────────────────────────────────────────────────


def build_universal_data(raw_settings: Any = None) -> UniversalTemplateData:
    """Map raw store settings onto the universal field set.

    Accepts anything; non-mapping input is treated as an empty settings blob.
    """
    settings: Mapping[str, Any] = raw_settings if isinstance(raw_settings, Mapping) else {}
    values = {spec.name: _resolve_field(spec, settings) for spec in UNIVERSAL_FIELDS}
    return UniversalTemplateData(**values, raw_settings=copy.deepcopy(dict(settings)))


def universal_defaults() -> dict[str, Any]:
    """Default value of every universal field, keyed by field name."""
    return {spec.name: spec.default_value() for spec in UNIVERSAL_FIELDS}


def get_field(name: str) -> UniversalField:
    """Look up a field by snake_case or camelCase name."""
    spec = _FIELDS_BY_NAME.get(name)
    if spec is None:
        raise UnknownFieldError(name)
    return spec


def get_settings_key(name: str) -> str:
    """Raw settings key that stores *name*."""
    return get_field(name).settings_key


def get_edit_path(name: str) -> str:
    """Edit path for the click-to-edit overlay: ``__settings.<settings_key>``.

    Raises:
        UnknownFieldError: *name* is not a documented universal field.
    """
    return get_field(name).edit_path


def editable_fields(category: str | None = None) -> list[UniversalField]:
    """Editor-visible fields in table order, optionally for one category."""
    return [
        spec
        for spec in UNIVERSAL_FIELDS
        if spec.editable and (category is None or spec.category == category)
    ]


def fields_by_category(*, editable_only: bool = True) -> dict[str, list[UniversalField]]:
    """Group fields by category, preserving table order."""
    groups: dict[str, list[UniversalField]] = {}
    for spec in UNIVERSAL_FIELDS:
        if editable_only and not spec.editable:
            continue
        groups.setdefault(spec.category, []).append(spec)
    return groups


def field_categories() -> list[str]:
    """All categories in table order."""
    return list(dict.fromkeys(spec.category for spec in UNIVERSAL_FIELDS))


@dataclass(frozen=True)
class FieldSummary:
    """Serializable view of a field for CLI and editor listings."""

    name: str
    alias: str
    settings_key: str
    edit_path: str
    kind: str
    label: str
    category: str
    editable: bool
    default: Any = field(default=None)

    @classmethod
    def from_field(cls, spec: UniversalField) -> FieldSummary:
        return cls(
            name=spec.name,
            alias=spec.alias,
            settings_key=spec.settings_key,
            edit_path=spec.edit_path,
            kind=spec.kind.value,
            label=spec.label,
            category=spec.category,
            editable=spec.editable,
            default=spec.default_value(),
        )


"""Static registry of storefront templates and their settings panels.

Lookups never raise: unknown ids yield ``None`` or an empty list.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from storefrontctl.domain.universal import UniversalField, editable_fields

TEMPLATE_DIR: Final = "storefront"


@dataclass(frozen=True)
class SettingsPanel:
    """Which universal field categories a template's settings editor shows."""

    id: str
    title: str
    categories: tuple[str, ...]


SETTINGS_PANELS: Final[dict[str, SettingsPanel]] = {
    panel.id: panel
    for panel in (
        SettingsPanel(
            "standard",
            "Store Settings",
            ("Store Info", "Header", "Hero", "Colors", "Typography", "Layout", "Featured", "Footer"),
        ),
        SettingsPanel(
            "showcase",
            "Showcase Settings",
            (
                "Store Info", "Header", "Hero", "Colors", "Typography", "Layout",
                "Effects", "Featured", "Testimonials", "Footer", "Products",
            ),
        ),
        SettingsPanel(
            "catalog",
            "Catalog Settings",
            ("Store Info", "Header", "Hero", "Colors", "Layout", "Featured", "Footer", "Products"),
        ),
    )
}


@dataclass(frozen=True)
class TemplateMetadata:
    """Registry entry for one storefront template."""

    id: str
    name: str
    description: str
    category: str
    settings_component: str
    preview: str | None = None

    @property
    def component(self) -> str:
        """Jinja2 template name that renders this storefront."""
        return f"{TEMPLATE_DIR}/{self.id}.html.j2"


def _t(tid: str, name: str, description: str, category: str, panel: str) -> TemplateMetadata:
    return TemplateMetadata(
        id=tid,
        name=name,
        description=description,
        category=category,
        settings_component=panel,
        preview=f"/templates/{tid}-preview.png",
    )


TEMPLATES: Final[tuple[TemplateMetadata, ...]] = (
    _t("fashion", "Fashion", "Premium fashion storefront with multi-filter system", "apparel", "catalog"),
    _t("fashion2", "Fashion II", "Alternative fashion layout with gallery view", "apparel", "catalog"),
    _t("fashion3", "Fashion III", "Minimalist fashion with focus on individual pieces", "apparel", "standard"),
    _t("baby", "Baby Store", "Warm and friendly baby products showcase", "retail", "showcase"),
    _t("bags", "Bags", "Editorial luxury bags with material-focused design", "luxury", "showcase"),
    _t("beauty", "Beauty", "Modern beauty and cosmetics storefront", "beauty", "showcase"),
    _t("cafe", "Cafe", "Coffee and cafe products with warm aesthetic", "food-beverage", "standard"),
    _t("electronics", "Electronics", "Tech store with glassmorphism and modern UI", "tech", "catalog"),
    _t("food", "Food", "Japanese minimal food storefront", "food-beverage", "standard"),
    _t("furniture", "Furniture", "Modern furniture with spatial design focus", "home", "showcase"),
    _t("jewelry", "Jewelry", "Luxury jewelry with premium presentation", "luxury", "showcase"),
    _t("perfume", "Perfume", "Premium fragrance with realm-based categorization", "luxury", "showcase"),
)

_TEMPLATES_BY_ID: Final[dict[str, TemplateMetadata]] = {t.id: t for t in TEMPLATES}


def get_template(template_id: str) -> TemplateMetadata | None:
    return _TEMPLATES_BY_ID.get(template_id)


def get_template_component(template_id: str) -> str | None:
    template = get_template(template_id)
    return template.component if template else None


def get_template_settings(template_id: str) -> SettingsPanel | None:
    """Settings panel for *template_id*, or None for an unknown template."""
    template = get_template(template_id)
    return SETTINGS_PANELS.get(template.settings_component) if template else None


def get_templates_by_category(category: str) -> list[TemplateMetadata]:
    return [t for t in TEMPLATES if t.category == category]


def get_template_list() -> list[TemplateMetadata]:
    return list(TEMPLATES)


def template_categories() -> list[str]:
    return list(dict.fromkeys(t.category for t in TEMPLATES))


def panel_fields(panel: SettingsPanel) -> list[UniversalField]:
    """Editable universal fields shown by *panel*, grouped in panel order."""
    return [spec for category in panel.categories for spec in editable_fields(category)]

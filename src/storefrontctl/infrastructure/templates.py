"""Jinja2 template loading with per-project overrides, plus render helpers."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader, select_autoescape
from markupsafe import Markup, escape

from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.paths import responsive_edit_path
from storefrontctl.domain.responsive import (
    is_number,
    resolve_responsive_number,
    resolve_responsive_style,
    resolve_responsive_value,
)
from storefrontctl.domain.universal import get_edit_path

OVERRIDE_DIR = Path(".storefrontctl") / "templates"

EDIT_PATH_ATTR = "data-edit-path"

# CSS properties whose numeric values carry no unit.
_UNITLESS = frozenset(
    {"opacity", "font-weight", "line-height", "z-index", "flex-grow", "flex-shrink", "order", "scale"}
)

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")


def build_template_environment(group: str = "storefront", *, project_root: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Overrides are loaded from ``.storefrontctl/templates/`` under the project
    root, either namespaced by *group* or flat.
    """
    loaders: list[BaseLoader] = []
    if project_root is not None:
        template_root = project_root / OVERRIDE_DIR
        loaders.append(FileSystemLoader([str(template_root / group), str(template_root)]))

    loaders.append(PackageLoader("storefrontctl", "templates"))
    env = Environment(
        loader=ChoiceLoader(loaders),
        autoescape=select_autoescape(enabled_extensions=("html", "j2")),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["css"] = css_declarations
    return env


def css_property(key: str) -> str:
    """``paddingX`` -> ``padding-x``; already-kebab names pass through."""
    return _CAMEL_RE.sub("-", key).lower()


def css_declarations(style: Any) -> str:
    """Serialize a flat style mapping to inline CSS.

    Numbers get ``px`` unless the property is unitless; None is skipped.
    """
    if not isinstance(style, Mapping):
        return ""
    parts: list[str] = []
    for key, value in style.items():
        if value is None or isinstance(value, (Mapping, list)):
            continue
        prop = css_property(str(key))
        if is_number(value) and prop not in _UNITLESS:
            text = f"{value}px"
        elif isinstance(value, bool):
            continue
        else:
            text = str(value)
        parts.append(f"{prop}: {text}")
    return "; ".join(parts)


@dataclass(frozen=True)
class PageHelpers:
    """Per-render helper bundle exposed to templates as ``h``.

    Everything a template needs to know about the current breakpoint, edit
    mode and asset table travels here, so templates stay free of globals.
    """

    breakpoint: Breakpoint
    edit: bool = False
    assets: Mapping[str, Any] = field(default_factory=dict)

    # -- responsive values --

    def rv(self, value: Any, default: Any = None) -> Any:
        return resolve_responsive_value(value, self.breakpoint, default)

    def num(self, value: Any, default: float | None = None) -> float | None:
        return resolve_responsive_number(value, self.breakpoint, default)

    def style(self, style: Any) -> str:
        """Resolve a (possibly responsive) style mapping to inline CSS."""
        return css_declarations(resolve_responsive_style(style, self.breakpoint))

    def box(self, section: Any) -> dict[str, Any]:
        """Padding and gap of a layout section as a style mapping."""
        if not isinstance(section, Mapping):
            return {}
        px = self.num(section.get("paddingX"))
        py = self.num(section.get("paddingY"))
        return {
            "paddingLeft": px,
            "paddingRight": px,
            "paddingTop": py,
            "paddingBottom": py,
            "gap": self.num(section.get("gap")),
        }

    # -- edit attributes --

    def edit_attr(self, path: str, *, responsive: bool = False) -> Markup:
        """`` data-edit-path="..."`` in edit mode, nothing otherwise."""
        if not self.edit:
            return Markup("")
        target = responsive_edit_path(path, self.breakpoint) if responsive else path
        return Markup(' {}="{}"').format(Markup(EDIT_PATH_ATTR), escape(target))

    def field_attr(self, name: str) -> Markup:
        """Edit attribute for a universal field (``__settings.<key>``)."""
        if not self.edit:
            return Markup("")
        return self.edit_attr(get_edit_path(name))

    # -- content nodes --

    @staticmethod
    def entries(section: Any, key: str) -> list[Any]:
        """The list stored under *key* of a layout section, else ``[]``.

        Jinja2 resolves ``section['items']`` to the bound ``dict.items``
        when the key is absent, so templates iterate through this helper.
        """
        if not isinstance(section, Mapping):
            return []
        value = section.get(key)
        return list(value) if isinstance(value, list) else []

    @staticmethod
    def text(node: Any, default: str = "") -> str:
        """String content of a text node or bare string."""
        if isinstance(node, str):
            return node
        if isinstance(node, Mapping) and isinstance(node.get("value"), str):
            return node["value"]
        return default

    def image_url(self, node: Any) -> str:
        """URL of an image node, looked up in the asset table by ``assetKey``."""
        if isinstance(node, str):
            return node
        if not isinstance(node, Mapping):
            return ""
        if isinstance(node.get("url"), str):
            return node["url"]
        asset = self.assets.get(str(node.get("assetKey", "")))
        if isinstance(asset, Mapping) and isinstance(asset.get("url"), str):
            return asset["url"]
        return ""

    @staticmethod
    def alt(node: Any, default: str = "") -> str:
        if isinstance(node, Mapping) and isinstance(node.get("alt"), str) and node["alt"].strip():
            return node["alt"]
        return default

    @staticmethod
    def link_label(item: Any) -> str:
        if isinstance(item, Mapping) and "action" in item:
            return PageHelpers.text(item.get("label"))
        return PageHelpers.text(item)

    @staticmethod
    def link_action(item: Any) -> str:
        if isinstance(item, Mapping) and isinstance(item.get("action"), str):
            return item["action"]
        return "#"

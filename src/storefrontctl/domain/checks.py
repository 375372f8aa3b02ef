"""Advisory content checks for page documents.

Warnings never block a save or a render; they point the editor at content a
shopper would notice (empty labels, broken links, images without alt text).
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from storefrontctl.domain.paths import resolve_path

_HTTP_RE = re.compile(r"^https?://", re.IGNORECASE)

_TEXT_PATHS: Final = (
    "layout.hero.title",
    "layout.hero.subtitle",
    "layout.featured.addLabel",
    "layout.footer.copyright",
)


@dataclass(frozen=True)
class ContentWarning:
    path: str
    message: str


def is_valid_action(action: Any) -> bool:
    """``#``, site-relative ``/...`` and absolute http(s) URLs are valid."""
    a = str(action or "").strip()
    if not a:
        return False
    return a == "#" or a.startswith("/") or bool(_HTTP_RE.match(a))


def _is_text_node(node: Any) -> bool:
    return isinstance(node, Mapping) and node.get("type") == "text"


def _text_is_empty(node: Any) -> bool:
    value = node.get("value")
    return not (isinstance(value, str) and value.strip())


def _missing_alt(image: Any) -> bool:
    if not image:
        return False
    alt = image.get("alt") if isinstance(image, Mapping) else None
    return not str(alt or "").strip()


def _section(doc: Any, key: str) -> Mapping[str, Any]:
    layout = doc.get("layout") if isinstance(doc, Mapping) else None
    section = layout.get(key) if isinstance(layout, Mapping) else None
    return section if isinstance(section, Mapping) else {}


def _as_list(value: Any) -> list[Any]:
    return value if isinstance(value, list) else []


def _check_links(
    items: list[Any], base: str, noun: str, out: list[ContentWarning]
) -> None:
    for i, item in enumerate(items):
        is_link = isinstance(item, Mapping) and isinstance(item.get("action"), str)
        label = item.get("label") if is_link else item
        label_path = f"{base}.{i}.label" if is_link else f"{base}.{i}"
        if _is_text_node(label) and _text_is_empty(label):
            out.append(ContentWarning(label_path, f"{noun} label is empty"))
        if is_link and not is_valid_action(item.get("action")):
            out.append(ContentWarning(label_path, f"{noun} action is missing/invalid"))


def _check_ctas(items: list[Any], base: str, out: list[ContentWarning]) -> None:
    for i, cta in enumerate(items):
        label_path = f"{base}.{i}.label"
        label = cta.get("label") if isinstance(cta, Mapping) else None
        if _is_text_node(label) and _text_is_empty(label):
            out.append(ContentWarning(label_path, "CTA label is empty"))
        action = cta.get("action") if isinstance(cta, Mapping) else None
        if not is_valid_action(action):
            out.append(ContentWarning(label_path, "CTA action is missing/invalid"))


def collect_content_warnings(doc: Any) -> list[ContentWarning]:
    """All content warnings for *doc*, in document order."""
    out: list[ContentWarning] = []
    header = _section(doc, "header")
    hero = _section(doc, "hero")
    featured = _section(doc, "featured")
    footer = _section(doc, "footer")

    if _missing_alt(header.get("logo")):
        out.append(ContentWarning("layout.header.logo", "Header logo is missing alt text"))
    if _missing_alt(hero.get("image")):
        out.append(ContentWarning("layout.hero.image", "Hero image is missing alt text"))

    for i, product in enumerate(_as_list(featured.get("items"))):
        if not isinstance(product, Mapping) or not _missing_alt(product.get("image")):
            continue
        pid = product.get("id")
        seg = str(pid) if isinstance(pid, (str, int)) and not isinstance(pid, bool) else str(i)
        out.append(ContentWarning(f"layout.featured.items.{seg}.image", "Product image is missing alt text"))

    for path in _TEXT_PATHS:
        node = resolve_path(doc, path).value
        if _is_text_node(node) and _text_is_empty(node):
            out.append(ContentWarning(path, "Text is empty"))

    _check_links(_as_list(header.get("nav")), "layout.header.nav", "Nav link", out)
    _check_links(_as_list(footer.get("links")), "layout.footer.links", "Footer link", out)
    _check_ctas(_as_list(hero.get("cta")), "layout.hero.cta", out)
    _check_ctas(_as_list(header.get("cta")), "layout.header.cta", out)
    return out

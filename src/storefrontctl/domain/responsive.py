"""Responsive value resolution and editor helpers.

A ResponsiveValue is either a bare scalar (applies to every breakpoint) or a
mapping keyed by breakpoint name.  Resolution never raises: anything that
cannot be resolved falls back to the caller's default.

INVARIANT: Inputs are never mutated.  Every helper returns new objects.
"""

from __future__ import annotations

import math
import re
from collections.abc import Mapping
from typing import Any

from storefrontctl.domain.breakpoints import ALL, BREAKPOINT_KEYS, Breakpoint, coerce_breakpoint


def is_number(value: Any) -> bool:
    """True for ints and floats, but not bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_responsive_map(value: Any) -> bool:
    """True when *value* is a mapping with at least one breakpoint key."""
    return isinstance(value, Mapping) and any(k in value for k in BREAKPOINT_KEYS)


def resolve_responsive_value(
    value: Any,
    breakpoint: Breakpoint | str,
    default: Any = None,
) -> Any:
    """Resolve *value* for *breakpoint* with desktop fallback.

    Bare scalars are returned unchanged.  Mappings without breakpoint keys are
    not responsive and pass through untouched.
    """
    if value is None:
        return default
    if not is_responsive_map(value):
        return value
    bp = coerce_breakpoint(breakpoint)
    own = value.get(bp.value)
    if own is not None:
        return own
    desktop = value.get(Breakpoint.DESKTOP.value)
    if desktop is not None:
        return desktop
    return default


def resolve_responsive_number(
    value: Any,
    breakpoint: Breakpoint | str,
    default: float | None = None,
) -> float | None:
    """Numeric variant of :func:`resolve_responsive_value`.

    Only numeric tiers count; a tier holding a string is treated as absent.

    Examples:
        >>> resolve_responsive_number({"mobile": 1, "desktop": 3}, "tablet")
        3
        >>> resolve_responsive_number(7, "mobile")
        7
    """
    if is_number(value):
        return value
    if not is_responsive_map(value):
        return default
    bp = coerce_breakpoint(breakpoint)
    own = value.get(bp.value)
    if is_number(own):
        return own
    desktop = value.get(Breakpoint.DESKTOP.value)
    if is_number(desktop):
        return desktop
    return default


def resolve_responsive_style(style: Any, breakpoint: Breakpoint | str) -> dict[str, Any]:
    """Flatten a style mapping to one concrete value per key.

    Responsive entries resolve independently; plain values (colors, font
    names) pass through.  Entries that resolve to nothing are omitted so the
    result can be used directly as inline style.
    """
    if not isinstance(style, Mapping):
        return {}
    out: dict[str, Any] = {}
    for key, raw in style.items():
        resolved = resolve_responsive_value(raw, breakpoint)
        if resolved is not None:
            out[key] = resolved
    return out


# ── Editor helpers ────────────────────────────────────────────────────


def get_responsive_number(value: Any, edit_breakpoint: Breakpoint | str) -> float | None:
    """Read the number the editor shows for *edit_breakpoint*.

    ``"all"`` reads the desktop tier of a responsive map.
    """
    if edit_breakpoint == ALL:
        if is_number(value):
            return value
        if isinstance(value, Mapping):
            desktop = value.get(Breakpoint.DESKTOP.value)
            return desktop if is_number(desktop) else None
        return None
    return resolve_responsive_number(value, edit_breakpoint)


def set_responsive_number(current: Any, edit_breakpoint: Breakpoint | str, new: float) -> Any:
    """Return *current* with *new* written at *edit_breakpoint*.

    Writing ``"all"`` collapses the value to a scalar.  A scalar current value
    becomes the desktop tier before the requested tier is set.
    """
    if edit_breakpoint == ALL:
        return new
    base: dict[str, Any] = dict(current) if isinstance(current, Mapping) else {}
    if is_number(current):
        base[Breakpoint.DESKTOP.value] = current
    base[coerce_breakpoint(edit_breakpoint).value] = new
    return base


_LAYOUT_RESPONSIVE_PATHS = frozenset(
    {
        "layout.header.paddingX",
        "layout.header.paddingY",
        "layout.hero.paddingX",
        "layout.hero.paddingY",
        "layout.hero.gap",
        "layout.hero.imageHeight",
        "layout.footer.paddingX",
        "layout.footer.paddingY",
        "layout.featured.columns",
        "layout.featured.gap",
        "layout.featured.paddingX",
        "layout.featured.paddingY",
        "layout.featured.card.radius",
        "layout.featured.card.imageHeight",
        "styles.background.posX",
        "styles.background.posY",
        "styles.background.opacity",
    }
)

_IMAGE_TRANSFORM_RE = re.compile(r"\.(posX|posY|scaleX|scaleY|size)$")
_TEXT_STYLE_RE = re.compile(r"\.style\.(fontSize|lineHeight|letterSpacing|fontWeight|padding|margin)$")


def is_responsive_number_path(path: str) -> bool:
    """True when the document path stores a ResponsiveValue[number]."""
    p = str(path or "")
    if not p:
        return False
    if p in _LAYOUT_RESPONSIVE_PATHS:
        return True
    return bool(_IMAGE_TRANSFORM_RE.search(p) or _TEXT_STYLE_RE.search(p))


# ── Sanitizing ────────────────────────────────────────────────────────


def clamp(n: float, low: float, high: float) -> float:
    """Clamp *n* into ``[low, high]``; NaN clamps to *low*."""
    if isinstance(n, float) and math.isnan(n):
        return low
    return max(low, min(high, n))


# (pattern, low, high, round_to_int); first match wins.
_CLAMP_RULES: tuple[tuple[re.Pattern[str], float, float, bool], ...] = (
    (re.compile(r"\.(posX|posY)$"), 0, 1, False),
    (re.compile(r"\.opacity$"), 0, 1, False),
    (re.compile(r"^layout\.featured\.columns$"), 1, 6, True),
    (re.compile(r"\.(scaleX|scaleY|size)$"), 0.1, 5, False),
    (re.compile(r"\.style\.fontSize$"), 8, 96, False),
    (re.compile(r"\.style\.fontWeight$"), 100, 900, True),
    (re.compile(r"\.style\.lineHeight$"), 0.8, 4, False),
    (re.compile(r"\.style\.letterSpacing$"), -5, 20, False),
    (re.compile(r"\.(paddingX|paddingY|gap|radius|imageHeight)$|\.style\.(padding|margin)$"), 0, 800, False),
)


def sanitize_number_for_path(path: str, value: float) -> float:
    """Clamp *value* to the range allowed for the document *path*."""
    p = str(path or "")
    for pattern, low, high, as_int in _CLAMP_RULES:
        if pattern.search(p):
            clamped = clamp(value, low, high)
            return round(clamped) if as_int else clamped
    return value


def sanitize_value_for_path(path: str, value: Any) -> tuple[Any, bool]:
    """Sanitize a scalar or responsive map.  Returns ``(value, changed)``."""
    if is_number(value):
        sanitized = sanitize_number_for_path(path, value)
        return sanitized, sanitized != value or (isinstance(value, float) and math.isnan(value))

    if is_responsive_map(value):
        out = dict(value)
        changed = False
        for key in BREAKPOINT_KEYS:
            tier = out.get(key)
            if is_number(tier):
                sanitized = sanitize_number_for_path(path, tier)
                if sanitized != tier or (isinstance(tier, float) and math.isnan(tier)):
                    changed = True
                out[key] = sanitized
        return out, changed

    return value, False

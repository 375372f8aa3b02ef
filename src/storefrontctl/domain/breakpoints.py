"""Breakpoint tiers and container-width detection.

Fallback is two-tier: a breakpoint's own value, then the desktop value.
Mobile never falls back to tablet.
"""

from __future__ import annotations

import logging
import math
from enum import StrEnum
from typing import Final

logger = logging.getLogger(__name__)


class Breakpoint(StrEnum):
    """Responsive viewport tiers."""

    MOBILE = "mobile"
    TABLET = "tablet"
    DESKTOP = "desktop"


BREAKPOINT_KEYS: Final[tuple[str, ...]] = tuple(bp.value for bp in Breakpoint)

# Editor pseudo-breakpoint: edits apply to every tier at once.
ALL: Final = "all"

TABLET_MIN_WIDTH: Final = 640
DESKTOP_MIN_WIDTH: Final = 768


def coerce_breakpoint(value: Breakpoint | str | None) -> Breakpoint:
    """Return the Breakpoint named by *value*, degrading to desktop."""
    if isinstance(value, Breakpoint):
        return value
    if isinstance(value, str):
        try:
            return Breakpoint(value.strip().lower())
        except ValueError:
            logger.debug("Unknown breakpoint %r, using desktop", value)
    return Breakpoint.DESKTOP


def breakpoint_for_width(width: float) -> Breakpoint:
    """Classify a container width in CSS pixels."""
    if not isinstance(width, (int, float)) or (isinstance(width, float) and math.isnan(width)):
        return Breakpoint.MOBILE
    if width >= DESKTOP_MIN_WIDTH:
        return Breakpoint.DESKTOP
    if width >= TABLET_MIN_WIDTH:
        return Breakpoint.TABLET
    return Breakpoint.MOBILE

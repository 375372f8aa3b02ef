"""Page document schema migrations.

Each step upgrades a document by exactly one version.  Steps run in order
from the document's stored version up to :data:`CURRENT_SCHEMA_VERSION`;
none is ever skipped.

INVARIANT: Every step is idempotent.  A step that finds its target field
already in the post-migration shape leaves it untouched, so legacy scalars
never overwrite an existing ``{mobile, desktop}`` map.

INVARIANT: ``migrate()`` never raises and never mutates its input.  Malformed
sub-fields are treated as absent and left for defaulting downstream.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Final

from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.responsive import is_number, is_responsive_map

logger = logging.getLogger(__name__)

CURRENT_SCHEMA_VERSION: Final = 4
BASE_SCHEMA_VERSION: Final = 1

# Legacy desktop overrides were stored beside the base value with this suffix.
LEGACY_DESKTOP_SUFFIX: Final = "Md"


@dataclass(frozen=True)
class MigrationResult:
    """Outcome of :func:`migrate`."""

    doc: dict[str, Any]
    migrated: bool
    from_version: int
    to_version: int


@dataclass(frozen=True)
class MigrationStep:
    """One ``from_version -> from_version + 1`` transformation.

    ``apply`` receives the layout of a private working copy and edits it in
    place.
    """

    from_version: int
    description: str
    apply: Callable[[dict[str, Any]], None]

    @property
    def to_version(self) -> int:
        return self.from_version + 1


# ── Step helpers ──────────────────────────────────────────────────────


def _section(layout: dict[str, Any], dotted: str) -> dict[str, Any] | None:
    """Return the nested section dict at *dotted* (e.g. ``featured.card``)."""
    current: Any = layout
    for seg in dotted.split("."):
        if not isinstance(current, dict):
            return None
        current = current.get(seg)
    return current if isinstance(current, dict) else None


def promote_to_responsive(section: dict[str, Any], field: str) -> bool:
    """Promote ``field`` (+ legacy ``fieldMd``) into a ``{mobile, desktop}`` map.

    Returns True when the section changed.
    """
    legacy_key = f"{field}{LEGACY_DESKTOP_SUFFIX}"
    had_legacy = legacy_key in section
    legacy = section.pop(legacy_key, None)
    current = section.get(field)

    if is_responsive_map(current):
        return had_legacy

    base = current if is_number(current) else None
    desktop = legacy if is_number(legacy) else base
    if base is None and desktop is None:
        return had_legacy

    promoted: dict[str, Any] = {}
    if base is not None:
        promoted[Breakpoint.MOBILE.value] = base
    promoted[Breakpoint.DESKTOP.value] = desktop
    section[field] = promoted
    return True


def _promote_fields(layout: dict[str, Any], targets: tuple[tuple[str, str], ...]) -> None:
    for dotted, field in targets:
        section = _section(layout, dotted)
        if section is not None and promote_to_responsive(section, field):
            logger.debug("Promoted layout.%s.%s to responsive", dotted, field)


def _as_link(item: Any) -> Any:
    if isinstance(item, str):
        return {"label": {"type": "text", "value": item}, "action": "#"}
    if isinstance(item, dict):
        if isinstance(item.get("action"), str):
            return item
        if item.get("type") == "text":
            return {"label": item, "action": "#"}
    return item


# ── Steps ─────────────────────────────────────────────────────────────


def _v1_hero_image_height(layout: dict[str, Any]) -> None:
    _promote_fields(layout, (("hero", "imageHeight"),))


_V3_TARGETS: Final = (
    ("featured", "columns"),
    ("featured", "gap"),
    ("featured.card", "imageHeight"),
    ("featured.card", "radius"),
    ("header", "paddingX"),
    ("header", "paddingY"),
    ("hero", "paddingX"),
    ("hero", "paddingY"),
    ("featured", "paddingX"),
    ("featured", "paddingY"),
    ("footer", "paddingX"),
    ("footer", "paddingY"),
)


def _v2_section_spacing(layout: dict[str, Any]) -> None:
    _promote_fields(layout, _V3_TARGETS)


def _v3_link_nodes(layout: dict[str, Any]) -> None:
    for dotted, field in (("header", "nav"), ("footer", "links")):
        section = _section(layout, dotted)
        if section is None or not isinstance(section.get(field), list):
            continue
        section[field] = [_as_link(item) for item in section[field]]


MIGRATION_STEPS: Final[tuple[MigrationStep, ...]] = (
    MigrationStep(1, "Promote hero image height to responsive", _v1_hero_image_height),
    MigrationStep(2, "Promote grid, card and section spacing to responsive", _v2_section_spacing),
    MigrationStep(3, "Normalize header nav and footer links to link nodes", _v3_link_nodes),
)


# ── Public API ────────────────────────────────────────────────────────


def read_version(raw: Mapping[str, Any]) -> int:
    """Infer the stored schema version; missing or unusable means version 1."""
    value = raw.get("version")
    if isinstance(value, bool) or value is None:
        return BASE_SCHEMA_VERSION
    if isinstance(value, int):
        return max(value, BASE_SCHEMA_VERSION)
    if isinstance(value, float) and value.is_integer():
        return max(int(value), BASE_SCHEMA_VERSION)
    if isinstance(value, str):
        try:
            return max(int(value.strip()), BASE_SCHEMA_VERSION)
        except ValueError:
            pass
    logger.debug("Unusable schema version %r, assuming %d", value, BASE_SCHEMA_VERSION)
    return BASE_SCHEMA_VERSION


def pending_steps(version: int) -> list[MigrationStep]:
    """Steps that would run for a document stored at *version*."""
    return [step for step in MIGRATION_STEPS if step.from_version >= version]


def migrate(raw: Any) -> MigrationResult:
    """Upgrade a page document to :data:`CURRENT_SCHEMA_VERSION`.

    Non-mapping input degrades to an empty current document and reports no
    migration.
    """
    if not isinstance(raw, Mapping):
        logger.debug("Page document is %s, not a mapping; using empty layout", type(raw).__name__)
        return MigrationResult(
            doc={"version": CURRENT_SCHEMA_VERSION, "layout": {}},
            migrated=False,
            from_version=CURRENT_SCHEMA_VERSION,
            to_version=CURRENT_SCHEMA_VERSION,
        )

    from_version = read_version(raw)
    doc: dict[str, Any] = copy.deepcopy(dict(raw))

    if from_version >= CURRENT_SCHEMA_VERSION:
        if from_version > CURRENT_SCHEMA_VERSION:
            logger.warning(
                "Page document version %d is newer than %d; leaving it unchanged",
                from_version,
                CURRENT_SCHEMA_VERSION,
            )
        return MigrationResult(
            doc=doc,
            migrated=False,
            from_version=from_version,
            to_version=CURRENT_SCHEMA_VERSION,
        )

    layout = doc.get("layout")
    if not isinstance(layout, dict):
        layout = {}
        doc["layout"] = layout

    version = from_version
    for step in pending_steps(from_version):
        step.apply(layout)
        version = step.to_version
        logger.debug("Applied migration %d -> %d: %s", step.from_version, version, step.description)

    doc["version"] = version
    return MigrationResult(
        doc=doc,
        migrated=from_version != version,
        from_version=from_version,
        to_version=CURRENT_SCHEMA_VERSION,
    )

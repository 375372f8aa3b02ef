"""Edit paths: dot-delimited addresses into a page document or raw settings.

Path grammar: ``segment(.segment)*``.  Inside a list, a numeric segment is an
index and any other segment matches the item whose ``id`` stringifies to it,
so ``layout.featured.items.p-42.image`` addresses product ``p-42``.

Paths prefixed with ``__settings.`` target raw settings keys instead of the
page document.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from storefrontctl.domain.breakpoints import ALL, Breakpoint, coerce_breakpoint

SETTINGS_PATH_PREFIX: Final = "__settings"


@dataclass(frozen=True)
class PathLookup:
    """Result of walking a path: the container, the final key, and the value."""

    parent: Any
    key: str | int | None
    value: Any


def parse_path(path: str) -> list[str]:
    """Split *path* into non-empty, trimmed segments."""
    return [seg.strip() for seg in str(path or "").split(".") if seg.strip()]


def _is_index(seg: str) -> bool:
    return seg.isdigit()


def _find_by_id(items: list[Any], seg: str) -> int | None:
    for idx, item in enumerate(items):
        if isinstance(item, Mapping) and "id" in item and str(item["id"]) == seg:
            return idx
    return None


def resolve_path(root: Any, path: str) -> PathLookup:
    """Walk *path* from *root*.  Missing segments yield ``value=None``."""
    parent: Any = None
    key: str | int | None = None
    current: Any = root

    for seg in parse_path(path):
        parent = current
        key = seg
        if isinstance(current, list):
            if _is_index(seg):
                key = int(seg)
                current = current[key] if key < len(current) else None
            else:
                idx = _find_by_id(current, seg)
                current = current[idx] if idx is not None else None
        elif isinstance(current, Mapping):
            current = current.get(seg)
        else:
            current = None

    return PathLookup(parent=parent, key=key, value=current)


def set_path(root: Any, path: str, value: Any) -> Any:
    """Return a deep copy of *root* with *value* written at *path*.

    Missing intermediate containers are created: a list when the following
    segment is numeric, a dict otherwise.  Writes into a list by unknown id
    are ignored.
    """
    parts = parse_path(path)
    new_root = copy.deepcopy(root)
    if not parts:
        return new_root

    current: Any = new_root
    for seg, next_seg in zip(parts, parts[1:], strict=False):
        if isinstance(current, list):
            if _is_index(seg):
                idx = int(seg)
                current = current[idx] if idx < len(current) else None
            else:
                found = _find_by_id(current, seg)
                current = current[found] if found is not None else None
        elif isinstance(current, dict):
            if current.get(seg) is None:
                current[seg] = [] if _is_index(next_seg) else {}
            current = current[seg]
        else:
            return new_root

    last = parts[-1]
    if isinstance(current, list):
        if _is_index(last):
            idx = int(last)
            if idx < len(current):
                current[idx] = value
            elif idx == len(current):
                current.append(value)
        else:
            found = _find_by_id(current, last)
            if found is not None:
                current[found] = value
    elif isinstance(current, dict):
        current[last] = value

    return new_root


def responsive_edit_path(path: str, breakpoint: Breakpoint | str | None) -> str:
    """Append a breakpoint suffix: ``layout.hero.imageHeight.mobile``."""
    base = ".".join(parse_path(path))
    if breakpoint is None or (isinstance(breakpoint, str) and breakpoint.strip().lower() == ALL):
        return base
    return f"{base}.{coerce_breakpoint(breakpoint).value}"


def settings_edit_path(settings_key: str) -> str:
    """Edit path for a raw settings key: ``__settings.<key>``."""
    return f"{SETTINGS_PATH_PREFIX}.{settings_key}"


def is_settings_path(path: str) -> bool:
    parts = parse_path(path)
    return bool(parts) and parts[0] == SETTINGS_PATH_PREFIX

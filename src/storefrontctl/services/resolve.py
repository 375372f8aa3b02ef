"""ResolveService: the concrete value of a document path at a breakpoint."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from storefrontctl.config.logging import bind_document
from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.paths import is_settings_path, parse_path, resolve_path
from storefrontctl.domain.responsive import (
    is_responsive_map,
    resolve_responsive_style,
    resolve_responsive_value,
)
from storefrontctl.services._helpers import choose_breakpoint
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ErrorCode, ServiceResult


class ResolveService(BaseService):
    """Looks up a path in the migrated page (or raw settings) and resolves it."""

    def resolve(
        self,
        path: Path | str,
        doc_path: str,
        *,
        breakpoint: Breakpoint | str | None = None,
        width: float | None = None,
    ) -> ServiceResult:
        """Resolve *doc_path* for one breakpoint.

        ``__settings.<key>`` paths read raw settings; anything else reads the
        page document after migration.  A plain mapping (a whole section or
        style block) is flattened key by key.
        """
        op = "resolve"
        with bind_document(path):
            doc = self._load(path, op=op)
            if isinstance(doc, ServiceResult):
                return doc

            bp = choose_breakpoint(breakpoint, width, self._settings.render.default_breakpoint)
            if is_settings_path(doc_path):
                root: Any = doc.settings
                lookup_path = ".".join(parse_path(doc_path)[1:])
            else:
                root = self._migrate_page(doc).doc
                lookup_path = doc_path

            raw = resolve_path(root, lookup_path).value if lookup_path else None
            if raw is None:
                return ServiceResult.failure(
                    op, ErrorCode.NOT_FOUND, f"Nothing at path {doc_path!r}", doc_path=doc_path
                )

            responsive = is_responsive_map(raw)
            if isinstance(raw, Mapping) and not responsive:
                value: Any = resolve_responsive_style(raw, bp)
            else:
                value = resolve_responsive_value(raw, bp)

            return ServiceResult(
                ok=True,
                op=op,
                data={
                    "doc_path": doc_path,
                    "breakpoint": bp.value,
                    "responsive": responsive,
                    "raw": raw,
                    "value": value,
                },
            )

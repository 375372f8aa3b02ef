"""MigrateService: bring a store document's page up to the current schema."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from storefrontctl.config.logging import bind_document
from storefrontctl.domain.migrations import CURRENT_SCHEMA_VERSION, pending_steps
from storefrontctl.infrastructure.documents import DocumentError, save_document
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ServiceResult

logger = logging.getLogger(__name__)


class MigrateService(BaseService):
    """Reports and applies page document migrations."""

    def check(self, path: Path | str) -> ServiceResult:
        """Report which migration steps would run, without writing."""
        with bind_document(path):
            doc = self._load(path, op="migrate_check")
            if isinstance(doc, ServiceResult):
                return doc

            result = self._migrate_page(doc)
            steps = pending_steps(result.from_version) if result.migrated else []
            return ServiceResult(
                ok=True,
                op="migrate_check",
                data={
                    "path": str(self._resolve(path)),
                    "from_version": result.from_version,
                    "to_version": result.to_version,
                    "needs_migration": result.migrated,
                    "pending": [step.description for step in steps],
                },
            )

    def apply(self, path: Path | str, *, write: bool = True) -> ServiceResult:
        """Migrate the page and, when *write* is set, save it back.

        The previous file is copied to ``<name>.bak`` first when
        ``[migrate] backup`` is enabled.
        """
        op = "migrate_apply"
        resolved = self._resolve(path)
        with bind_document(resolved):
            doc = self._load(resolved, op=op)
            if isinstance(doc, ServiceResult):
                return doc

            result = self._migrate_page(doc)
            applied = pending_steps(result.from_version) if result.migrated else []
            data: dict[str, Any] = {
                "path": str(resolved),
                "from_version": result.from_version,
                "to_version": result.to_version,
                "migrated": result.migrated,
                "applied": [step.description for step in applied],
                "written": False,
                "backup": None,
            }
            warnings: list[str] = []
            if result.from_version > CURRENT_SCHEMA_VERSION:
                warnings.append(
                    f"Page version {result.from_version} is newer than {CURRENT_SCHEMA_VERSION}; left unchanged"
                )

            if not result.migrated:
                return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

            if not write:
                data["page"] = result.doc
                return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

            cfg = self._settings.migrate
            try:
                backup = save_document(
                    resolved,
                    doc.model_copy(update={"page": result.doc}),
                    indent=cfg.indent,
                    backup=cfg.backup,
                )
            except DocumentError as exc:
                return ServiceResult.failure(op, exc.code, str(exc), path=str(resolved))

            logger.info("Wrote migrated document")
            data["written"] = True
            data["backup"] = str(backup) if backup else None
            return ServiceResult(ok=True, op=op, data=data, warnings=warnings)

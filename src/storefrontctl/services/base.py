"""BaseService, the shared foundation of all storefrontctl services.

Every service receives the resolved :class:`StorefrontSettings` at
construction time.  Store documents are loaded through :meth:`_load`, which
turns I/O and validation failures into a failed ServiceResult instead of an
exception.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from storefrontctl.domain.migrations import MigrationResult, migrate
from storefrontctl.infrastructure.documents import DocumentError, StoreDocument, load_document
from storefrontctl.services.result import ServiceResult

if TYPE_CHECKING:
    from storefrontctl.config.settings import StorefrontSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for all service-layer classes.

    Usage::

        class CheckService(BaseService):
            def check(self, path: Path) -> ServiceResult:
                doc = self._load(path, op="check")
                if isinstance(doc, ServiceResult):
                    return doc
                ...
    """

    def __init__(self, settings: StorefrontSettings) -> None:
        self._settings = settings

    @property
    def settings(self) -> StorefrontSettings:
        return self._settings

    def _resolve(self, path: Path | str) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._settings.project_root / p

    def _load(self, path: Path | str, *, op: str) -> StoreDocument | ServiceResult:
        """Load a store document, or a failed result describing why not."""
        resolved = self._resolve(path)
        try:
            return load_document(resolved)
        except DocumentError as exc:
            logger.debug("Failed to load %s: %s", resolved, exc)
            return ServiceResult.failure(op, exc.code, str(exc), path=str(resolved))

    @staticmethod
    def _migrate_page(doc: StoreDocument) -> MigrationResult:
        result = migrate(doc.page)
        if result.migrated:
            logger.info(
                "Migrated page document v%d -> v%d",
                result.from_version,
                result.to_version,
            )
        return result

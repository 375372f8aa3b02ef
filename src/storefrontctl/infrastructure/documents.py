"""Store document I/O.

A store document is the JSON file the CLI operates on::

    {"template": "fashion", "settings": {...raw settings...}, "page": {...}}

INVARIANT: Files are truth.  Loading validates only the envelope; the page
document inside may be absent or malformed and is repaired by the migrator,
never here.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = ".bak"


class DocumentError(Exception):
    """Base for store document failures; ``code`` maps to a ServiceError code."""

    code = "INVALID_DOCUMENT"

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


class DocumentNotFoundError(DocumentError):
    code = "NOT_FOUND"


class InvalidDocumentError(DocumentError):
    code = "INVALID_DOCUMENT"


class DocumentWriteError(DocumentError):
    code = "WRITE_FAILED"


class StoreDocument(BaseModel):
    """Envelope of a store document.  Unknown top-level keys are preserved."""

    model_config = ConfigDict(extra="allow")

    template: str | None = None
    settings: dict[str, Any] = Field(default_factory=dict)
    page: Any = None


def load_document(path: Path) -> StoreDocument:
    """Read and validate the store document at *path*.

    Raises:
        DocumentNotFoundError: *path* does not exist.
        InvalidDocumentError: The file is not JSON or not a store document.
    """
    if not path.is_file():
        raise DocumentNotFoundError(path, f"Store document not found: {path}")
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidDocumentError(path, f"Cannot read {path}: {exc}") from exc
    if not isinstance(raw, dict):
        raise InvalidDocumentError(path, f"{path} must contain a JSON object")
    try:
        return StoreDocument.model_validate(raw)
    except ValidationError as exc:
        raise InvalidDocumentError(path, f"Invalid store document {path}: {exc}") from exc


def save_document(
    path: Path,
    doc: StoreDocument,
    *,
    indent: int = 2,
    backup: bool = False,
) -> Path | None:
    """Write *doc* to *path*, optionally copying the old file aside first.

    Returns the backup path when one was written.

    Raises:
        DocumentWriteError: The backup or the write failed.
    """
    backup_path: Path | None = None
    try:
        if backup and path.is_file():
            backup_path = path.with_name(path.name + BACKUP_SUFFIX)
            shutil.copy2(path, backup_path)
            logger.debug("Backed up %s to %s", path, backup_path)
        text = json.dumps(doc.model_dump(mode="json"), indent=indent or None, ensure_ascii=False)
        path.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        raise DocumentWriteError(path, f"Cannot write {path}: {exc}") from exc
    return backup_path

"""CheckService: advisory content warnings plus a pending-migration report.

Single command following the linter pattern.  Nothing is modified; the
document is migrated in memory so warnings use current-schema paths.
"""

from __future__ import annotations

from pathlib import Path

from storefrontctl.config.logging import bind_document
from storefrontctl.domain.checks import collect_content_warnings
from storefrontctl.domain.migrations import pending_steps
from storefrontctl.domain.presets import normalize_template_id
from storefrontctl.domain.registry import get_template
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ServiceResult


class CheckService(BaseService):
    """Reports content issues without modifying anything."""

    def check(self, path: Path | str) -> ServiceResult:
        with bind_document(path):
            doc = self._load(path, op="check")
            if isinstance(doc, ServiceResult):
                return doc

            result = self._migrate_page(doc)
            issues = [
                {"path": w.path, "message": w.message}
                for w in collect_content_warnings(result.doc)
            ]

            warnings: list[str] = []
            template_id = normalize_template_id(doc.template, self._settings.render.default_template)
            if get_template(template_id) is None:
                warnings.append(f"Unknown template {template_id!r}")
            if doc.page is None:
                warnings.append("Store document has no page; defaults will be used")

            steps = pending_steps(result.from_version) if result.migrated else []
            return ServiceResult(
                ok=True,
                op="check",
                data={
                    "path": str(self._resolve(path)),
                    "template": template_id,
                    "from_version": result.from_version,
                    "needs_migration": result.migrated,
                    "pending": [step.description for step in steps],
                    "issues": issues,
                    "count": len(issues),
                },
                warnings=warnings,
            )

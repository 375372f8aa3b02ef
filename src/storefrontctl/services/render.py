"""RenderService: the full pipeline from store document to storefront HTML.

load -> migrate -> preset -> adapt -> resolve -> render.  Every stage is a
pure function of the previous one; the Jinja2 context is built fresh for each
call.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from jinja2 import TemplateError

from storefrontctl.config.logging import bind_document
from storefrontctl.domain.breakpoints import Breakpoint
from storefrontctl.domain.presets import normalize_template_id
from storefrontctl.domain.registry import get_template
from storefrontctl.domain.universal import build_universal_data
from storefrontctl.infrastructure.templates import PageHelpers, build_template_environment
from storefrontctl.services._helpers import choose_breakpoint, prepare_settings
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ErrorCode, ServiceResult

logger = logging.getLogger(__name__)


class RenderService(BaseService):
    """Renders a store document with a registered storefront template."""

    def render(
        self,
        path: Path | str,
        *,
        template: str | None = None,
        breakpoint: Breakpoint | str | None = None,
        width: float | None = None,
        edit: bool | None = None,
        output: Path | str | None = None,
    ) -> ServiceResult:
        """Render *path* to HTML.

        Args:
            path: Store document to render.
            template: Template id; defaults to the document's own template,
                then ``[render] default_template``.
            breakpoint: Target breakpoint.  Takes precedence over *width*.
            width: Container width in CSS pixels, used to pick a breakpoint.
            edit: Emit ``data-edit-path`` attributes.  Defaults to
                ``[render] edit_mode``.
            output: Write the HTML here instead of returning it in ``data``.
        """
        op = "render"
        with bind_document(path):
            doc = self._load(path, op=op)
            if isinstance(doc, ServiceResult):
                return doc

            cfg = self._settings.render
            template_id = normalize_template_id(template or doc.template, cfg.default_template)
            meta = get_template(template_id)
            if meta is None:
                return ServiceResult.failure(
                    op,
                    ErrorCode.UNKNOWN_TEMPLATE,
                    f"Unknown template: {template_id!r}",
                    template=template_id,
                )

            warnings: list[str] = []
            migration = self._migrate_page(doc)
            if migration.migrated:
                warnings.append(
                    f"Page migrated in memory from v{migration.from_version} to v{migration.to_version}; "
                    "run 'storefrontctl migrate' to save it"
                )
            page = migration.doc
            raw, preset = prepare_settings(doc.settings, template_id, apply_presets=cfg.apply_presets)
            data = build_universal_data(raw)

            bp = choose_breakpoint(breakpoint, width, cfg.default_breakpoint)
            edit_mode = cfg.edit_mode if edit is None else edit
            layout = page.get("layout")
            assets = page.get("assets")
            helpers = PageHelpers(
                breakpoint=bp,
                edit=edit_mode,
                assets=assets if isinstance(assets, dict) else {},
            )
            context: dict[str, Any] = {
                "template": meta,
                "data": data,
                "page": page,
                "layout": layout if isinstance(layout, dict) else {},
                "breakpoint": bp.value,
                "edit": edit_mode,
                "h": helpers,
            }

            env = build_template_environment("storefront", project_root=self._settings.project_root)
            try:
                html = env.get_template(meta.component).render(**context)
            except (TemplateError, TypeError, ValueError, ArithmeticError) as exc:
                logger.debug("Template %s failed", meta.component, exc_info=True)
                return ServiceResult.failure(
                    op, ErrorCode.RENDER_FAILED, f"Rendering {meta.component} failed: {exc}", template=template_id
                )

            result_data: dict[str, Any] = {
                "template": template_id,
                "component": meta.component,
                "preset": preset.id if preset else None,
                "breakpoint": bp.value,
                "edit": edit_mode,
                "bytes": len(html.encode("utf-8")),
                "output": None,
            }
            if output is None:
                result_data["html"] = html
                return ServiceResult(ok=True, op=op, data=result_data, warnings=warnings)

            out_path = self._resolve(output)
            try:
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out_path.write_text(html, encoding="utf-8")
            except OSError as exc:
                return ServiceResult.failure(
                    op, ErrorCode.WRITE_FAILED, f"Cannot write {out_path}: {exc}", path=str(out_path)
                )
            result_data["output"] = str(out_path)
            return ServiceResult(ok=True, op=op, data=result_data, warnings=warnings)

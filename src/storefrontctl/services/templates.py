"""TemplateService: browse the template registry."""

from __future__ import annotations

from storefrontctl.domain.presets import normalize_template_id, preset_for_template
from storefrontctl.domain.registry import (
    get_template,
    get_template_list,
    get_template_settings,
    get_templates_by_category,
    template_categories,
)
from storefrontctl.services._helpers import panel_to_dict, template_to_dict
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ErrorCode, ServiceResult


class TemplateService(BaseService):
    """Read-only queries over the static template registry."""

    def list_templates(self, category: str | None = None) -> ServiceResult:
        templates = get_templates_by_category(category) if category else get_template_list()
        warnings: list[str] = []
        if category and not templates:
            warnings.append(f"No templates in category {category!r}; known: {', '.join(template_categories())}")
        return ServiceResult(
            ok=True,
            op="list_templates",
            data={
                "templates": [template_to_dict(t) for t in templates],
                "count": len(templates),
            },
            warnings=warnings,
        )

    def show(self, template_id: str) -> ServiceResult:
        """Registry entry, theme preset and settings panel of one template."""
        tid = normalize_template_id(template_id, default="")
        template = get_template(tid)
        if template is None:
            return ServiceResult.failure(
                "show_template",
                ErrorCode.UNKNOWN_TEMPLATE,
                f"Unknown template: {template_id!r}",
                template=template_id,
            )

        panel = get_template_settings(tid)
        preset = preset_for_template(tid)
        return ServiceResult(
            ok=True,
            op="show_template",
            data={
                **template_to_dict(template),
                "preset": {"id": preset.id, "name": preset.name, "settings": preset.settings()},
                "panel": panel_to_dict(panel) if panel else None,
            },
        )

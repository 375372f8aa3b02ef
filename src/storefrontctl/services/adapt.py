"""AdaptService: raw store settings to universal template data."""

from __future__ import annotations

import dataclasses
from pathlib import Path

from storefrontctl.config.logging import bind_document
from storefrontctl.domain.presets import normalize_template_id
from storefrontctl.domain.universal import (
    UNIVERSAL_FIELDS,
    FieldSummary,
    UnknownFieldError,
    build_universal_data,
    field_categories,
    get_field,
)
from storefrontctl.services._helpers import prepare_settings
from storefrontctl.services.base import BaseService
from storefrontctl.services.result import ErrorCode, ServiceResult


class AdaptService(BaseService):
    """Builds universal data and answers field/edit-path lookups."""

    def adapt(
        self,
        path: Path | str,
        *,
        apply_presets: bool | None = None,
        camel_case: bool = False,
    ) -> ServiceResult:
        """Build :class:`UniversalTemplateData` from a store document.

        Args:
            path: Store document to read.
            apply_presets: Fill blank settings from the template's theme
                preset.  Defaults to ``[render] apply_presets``.
            camel_case: Key the output by camelCase aliases.
        """
        with bind_document(path):
            doc = self._load(path, op="adapt")
            if isinstance(doc, ServiceResult):
                return doc

            render_cfg = self._settings.render
            template_id = normalize_template_id(doc.template, render_cfg.default_template)
            use_presets = render_cfg.apply_presets if apply_presets is None else apply_presets
            raw, preset = prepare_settings(doc.settings, template_id, apply_presets=use_presets)
            data = build_universal_data(raw)

            return ServiceResult(
                ok=True,
                op="adapt",
                data={
                    "template": template_id,
                    "preset": preset.id if preset else None,
                    "fields": data.model_dump(mode="json", by_alias=camel_case, exclude={"raw_settings"}),
                },
            )

    def edit_path(self, name: str) -> ServiceResult:
        """Edit path (``__settings.<key>``) of a universal field."""
        try:
            spec = get_field(name)
        except UnknownFieldError as exc:
            return ServiceResult.failure("edit_path", ErrorCode.UNKNOWN_FIELD, str(exc), field=name)
        return ServiceResult(
            ok=True,
            op="edit_path",
            data={
                "field": spec.name,
                "alias": spec.alias,
                "settings_key": spec.settings_key,
                "fallback_keys": list(spec.fallback_keys),
                "edit_path": spec.edit_path,
            },
        )

    def list_fields(self, category: str | None = None, *, include_all: bool = False) -> ServiceResult:
        """List universal fields in table order.

        Only editor-visible fields are listed unless *include_all* is set.
        """
        warnings: list[str] = []
        if category is not None and category not in field_categories():
            warnings.append(f"Unknown category {category!r}; known: {', '.join(field_categories())}")

        fields = [
            dataclasses.asdict(FieldSummary.from_field(spec))
            for spec in UNIVERSAL_FIELDS
            if (include_all or spec.editable) and (category is None or spec.category == category)
        ]
        return ServiceResult(
            ok=True,
            op="list_fields",
            data={"fields": fields, "count": len(fields)},
            warnings=warnings,
        )

"""Tests for the operation-specific Rich renderers."""

from typing import Any

from storefrontctl.output.renderers import render_quiet, render_result
from storefrontctl.services.result import ServiceError, ServiceResult


def _ok(op: str, **data: Any) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str = "NOT_FOUND", msg: str = "missing", **detail: Any) -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code=code, message=msg, detail=detail))


class TestRenderQuiet:
    def test_templates_one_id_per_line(self) -> None:
        result = _ok("list_templates", templates=[{"id": "fashion"}, {"id": "cafe"}], count=2)
        assert render_quiet(result) == "fashion\ncafe"

    def test_fields_by_name(self) -> None:
        result = _ok("list_fields", fields=[{"name": "store_name"}, {"name": "hero_title"}], count=2)
        assert render_quiet(result) == "store_name\nhero_title"

    def test_issues_by_path(self) -> None:
        result = _ok("check", issues=[{"path": "layout.hero.image", "message": "x"}], count=1)
        assert render_quiet(result) == "layout.hero.image"

    def test_edit_path(self) -> None:
        assert render_quiet(_ok("edit_path", edit_path="__settings.banner_url")) == "__settings.banner_url"

    def test_resolve_value(self) -> None:
        assert render_quiet(_ok("resolve", value=220)) == "220"
        assert render_quiet(_ok("resolve", value="#fff")) == "#fff"
        assert render_quiet(_ok("resolve", value={"gap": 4})) == '{"gap": 4}'

    def test_render_output(self) -> None:
        assert render_quiet(_ok("render", output="/tmp/index.html")) == "/tmp/index.html"
        assert render_quiet(_ok("render", output=None)) == "OK: render"

    def test_error(self) -> None:
        assert render_quiet(_err("resolve")) == "ERROR: resolve: missing"


class TestRenderResult:
    def test_error_line(self) -> None:
        assert render_result(_err("show_template", "UNKNOWN_TEMPLATE", "Unknown template: 'x'")) == (
            "ERROR  show_template [UNKNOWN_TEMPLATE]  Unknown template: 'x'"
        )

    def test_error_detail_when_verbose(self) -> None:
        output = render_result(_err("render", path="/x/store.json"), verbose=True)
        assert "detail:" in output
        assert "path: /x/store.json" in output

    def test_migrate_apply(self) -> None:
        result = _ok(
            "migrate_apply",
            path="store.json",
            from_version=1,
            to_version=4,
            migrated=True,
            written=True,
            backup="store.json.bak",
            applied=["Promote hero image height to responsive"],
        )
        output = render_result(result)
        assert output.startswith("OK  migrate_apply")
        assert "version: 1 -> 4" in output
        assert "backup: store.json.bak" in output
        assert "- Promote hero image height to responsive" in output

    def test_list_templates_table(self) -> None:
        templates = [
            {"id": "cafe", "name": "Cafe", "category": "food-beverage", "settings_component": "standard",
             "description": "Coffee"},
        ]
        output = render_result(_ok("list_templates", templates=templates, count=1))
        assert "cafe" in output
        assert "food-beverage" in output
        assert "1 templates" in output
        assert "Coffee" not in output
        assert "Coffee" in render_result(_ok("list_templates", templates=templates, count=1), verbose=True)

    def test_show_template_panel(self) -> None:
        result = _ok(
            "show_template",
            id="cafe",
            name="Cafe",
            description="Coffee and cafe products",
            category="food-beverage",
            component="storefront/cafe.html.j2",
            preset={"id": "cafe-warm", "name": "Cafe Warm", "settings": {"primary_color": "#78350F"}},
            panel={"id": "standard", "title": "Store Settings", "categories": ["Hero"], "fields": ["hero_title"]},
        )
        output = render_result(result)
        assert "preset: cafe-warm (Cafe Warm)" in output
        assert "settings: Store Settings [Hero]" in output
        assert "primary_color" not in output
        assert "primary_color = #78350F" in render_result(result, verbose=True)

    def test_check_issues(self) -> None:
        result = _ok(
            "check",
            template="fashion",
            from_version=4,
            needs_migration=False,
            issues=[{"path": "layout.hero.image", "message": "Hero image is missing alt text"}],
            count=1,
        )
        output = render_result(result)
        assert "layout.hero.image" in output
        assert "Hero image is missing alt text" in output
        assert "1 issues" in output

    def test_check_clean(self) -> None:
        result = _ok("check", template="cafe", from_version=4, needs_migration=False, issues=[], count=0)
        assert "no content issues" in render_result(result)

    def test_resolve(self) -> None:
        result = _ok("resolve", doc_path="layout.hero.imageHeight", breakpoint="mobile", value=220,
                     responsive=True, raw={"mobile": 220})
        output = render_result(result)
        assert "value: 220" in output
        assert "raw:" not in output
        assert 'raw: {"mobile":220}' in render_result(result, verbose=True)

    def test_adapt_table(self) -> None:
        output = render_result(_ok("adapt", template="cafe", preset="cafe-warm", fields={"store_name": "Bean"}))
        assert "preset: cafe-warm" in output
        assert "store_name" in output
        assert "Bean" in output

    def test_generic_fallback(self) -> None:
        output = render_result(_ok("something_else", answer=42))
        assert output.startswith("OK  something_else")
        assert "answer: 42" in output

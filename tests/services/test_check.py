"""Tests for CheckService."""

from collections.abc import Callable
from pathlib import Path

from storefrontctl.config.settings import StorefrontSettings
from storefrontctl.services.check import CheckService


class TestCheck:
    def test_legacy_store(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = CheckService(settings).check(store_file())
        assert result.ok
        assert result.data["template"] == "fashion"
        assert result.data["needs_migration"] is True
        assert result.data["from_version"] == 1
        assert result.data["issues"] == [
            {"path": "layout.hero.image", "message": "Hero image is missing alt text"},
        ]
        assert result.data["count"] == 1
        assert result.warnings == []

    def test_does_not_modify(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        before = path.read_text()
        CheckService(settings).check(path)
        assert path.read_text() == before

    def test_clean_document(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        doc = {
            "template": "cafe",
            "page": {
                "version": 4,
                "layout": {"footer": {"links": [{"label": {"type": "text", "value": "Terms"}, "action": "/terms"}]}},
            },
        }
        result = CheckService(settings).check(store_file(doc=doc))
        assert result.data["count"] == 0
        assert result.data["needs_migration"] is False
        assert result.data["pending"] == []

    def test_paths_use_current_schema(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        doc = {"page": {"version": 3, "layout": {"header": {"nav": [""]}}}}
        result = CheckService(settings).check(store_file(doc=doc))
        assert result.data["issues"] == [{"path": "layout.header.nav.0.label", "message": "Nav link label is empty"}]

    def test_warnings(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = CheckService(settings).check(store_file(doc={"template": "toyshop"}))
        assert result.ok
        assert any("toyshop" in w for w in result.warnings)
        assert any("no page" in w for w in result.warnings)

    def test_missing_document(self, settings: StorefrontSettings) -> None:
        result = CheckService(settings).check("missing.json")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

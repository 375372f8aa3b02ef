"""Tests for AdaptService."""

from collections.abc import Callable
from pathlib import Path

from storefrontctl.config.settings import StorefrontSettings
from storefrontctl.services.adapt import AdaptService


class TestAdapt:
    def test_legacy_store(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = AdaptService(settings).adapt(store_file())
        assert result.ok
        assert result.data["template"] == "fashion"
        assert result.data["preset"] == "fashion-dark"
        fields = result.data["fields"]
        assert fields["store_name"] == "Atelier Nord"
        assert fields["hero_title"] == "Autumn Edit"
        assert fields["hero_image"] == "https://cdn.example.com/hero.jpg"
        assert fields["primary_color"] == "#222222"
        assert fields["background_color"] == "#09090F"
        assert fields["grid_columns"] == 3
        assert "raw_settings" not in fields

    def test_without_presets(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = AdaptService(settings).adapt(store_file(), apply_presets=False)
        assert result.data["preset"] is None
        assert result.data["fields"]["background_color"] == "#FFFFFF"

    def test_presets_disabled_in_config(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        cfg = settings.model_copy(update={"render": settings.render.model_copy(update={"apply_presets": False})})
        assert AdaptService(cfg).adapt(store_file()).data["preset"] is None

    def test_camel_case(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        fields = AdaptService(settings).adapt(store_file(), camel_case=True).data["fields"]
        assert fields["storeName"] == "Atelier Nord"
        assert "store_name" not in fields

    def test_default_template(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = AdaptService(settings).adapt(store_file(doc={"settings": {}}))
        assert result.data["template"] == "fashion"
        assert result.data["fields"]["store_name"] == "My Store"

    def test_missing_document(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).adapt("nope.json")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestEditPath:
    def test_known_field(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).edit_path("heroImage")
        assert result.ok
        assert result.data == {
            "field": "hero_image",
            "alias": "heroImage",
            "settings_key": "banner_url",
            "fallback_keys": ["template_hero_image"],
            "edit_path": "__settings.banner_url",
        }

    def test_unknown_field(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).edit_path("nonexistent")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNKNOWN_FIELD"
        assert result.error.detail == {"field": "nonexistent"}


class TestListFields:
    def test_editable_only(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).list_fields()
        names = [f["name"] for f in result.data["fields"]]
        assert result.data["count"] == len(names)
        assert "store_name" in names
        assert "header_nav_items" not in names

    def test_include_all(self, settings: StorefrontSettings) -> None:
        names = [f["name"] for f in AdaptService(settings).list_fields(include_all=True).data["fields"]]
        assert "header_nav_items" in names

    def test_category(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).list_fields("Colors")
        assert {f["category"] for f in result.data["fields"]} == {"Colors"}
        assert result.data["count"] == 6

    def test_unknown_category(self, settings: StorefrontSettings) -> None:
        result = AdaptService(settings).list_fields("Sounds")
        assert result.ok
        assert result.data["count"] == 0
        assert result.warnings

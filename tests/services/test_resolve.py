"""Tests for ResolveService."""

from collections.abc import Callable
from pathlib import Path

import pytest

from storefrontctl.config.settings import StorefrontSettings
from storefrontctl.services.resolve import ResolveService


class TestResolve:
    @pytest.mark.parametrize(("breakpoint", "expected"), [("mobile", 220), ("tablet", 420), ("desktop", 420)])
    def test_migrated_responsive_value(
        self,
        settings: StorefrontSettings,
        store_file: Callable[..., Path],
        breakpoint: str,
        expected: int,
    ) -> None:
        result = ResolveService(settings).resolve(store_file(), "layout.hero.imageHeight", breakpoint=breakpoint)
        assert result.ok
        assert result.data["value"] == expected
        assert result.data["responsive"] is True
        assert result.data["raw"] == {"mobile": 220, "desktop": 420}

    def test_width_selects_breakpoint(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = ResolveService(settings).resolve(store_file(), "layout.featured.columns", width=500)
        assert result.data["breakpoint"] == "mobile"
        assert result.data["value"] == 2

    def test_default_breakpoint(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = ResolveService(settings).resolve(store_file(), "layout.featured.columns")
        assert result.data["breakpoint"] == "desktop"
        assert result.data["value"] == 4

    def test_settings_path(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = ResolveService(settings).resolve(store_file(), "__settings.store_name")
        assert result.data["value"] == "Atelier Nord"
        assert result.data["responsive"] is False

    def test_section_is_flattened(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = ResolveService(settings).resolve(store_file(), "layout.hero", breakpoint="mobile")
        value = result.data["value"]
        assert value["imageHeight"] == 220
        assert value["title"] == {"type": "text", "value": "Autumn"}

    def test_list_item_by_id(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        result = ResolveService(settings).resolve(store_file(), "layout.featured.items.p-1.title")
        assert result.data["value"] == "Wool Coat"

    @pytest.mark.parametrize("doc_path", ["layout.footer.paddingX", "__settings", "__settings.absent"])
    def test_missing_path(self, settings: StorefrontSettings, store_file: Callable[..., Path], doc_path: str) -> None:
        result = ResolveService(settings).resolve(store_file(), doc_path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"

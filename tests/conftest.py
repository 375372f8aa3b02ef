"""Shared pytest fixtures for storefrontctl tests."""

from __future__ import annotations

import copy
import json
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from storefrontctl.config.settings import StorefrontSettings

# A store saved by an old editor: v1 page, legacy template id, Md overrides,
# bare-string nav items and a product image resolved through the asset table.
LEGACY_STORE: dict[str, Any] = {
    "template": "gold-fashion",
    "settings": {
        "store_name": "Atelier Nord",
        "template_hero_heading": "Autumn Edit",
        "template_hero_image": "https://cdn.example.com/hero.jpg",
        "primary_color": "#222222",
        "grid_columns": "3",
    },
    "page": {
        "version": 1,
        "layout": {
            "header": {"nav": ["Home", "Shop"], "paddingY": 12},
            "hero": {
                "imageHeight": 220,
                "imageHeightMd": 420,
                "title": {"type": "text", "value": "Autumn"},
                "image": {"assetKey": "hero", "alt": ""},
            },
            "featured": {
                "columns": 2,
                "columnsMd": 4,
                "items": [
                    {"id": "p-1", "title": "Wool Coat", "price": "120", "image": {"assetKey": "coat", "alt": "Coat"}},
                ],
            },
        },
        "assets": {
            "hero": {"url": "https://cdn.example.com/hero.jpg"},
            "coat": {"url": "https://cdn.example.com/coat.jpg"},
        },
    },
}


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory used as CWD, isolated from STOREFRONTCTL_* env vars."""
    for key in list(os.environ):
        if key.startswith("STOREFRONTCTL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def settings(project_root: Path) -> StorefrontSettings:
    return StorefrontSettings.from_cli(project_root=project_root)


@pytest.fixture
def legacy_store() -> dict[str, Any]:
    """A fresh copy of the legacy sample store document."""
    return copy.deepcopy(LEGACY_STORE)


@pytest.fixture
def store_file(project_root: Path, legacy_store: dict[str, Any]) -> Callable[..., Path]:
    """Factory writing a store document into the project root.

    ``store_file()`` writes the legacy sample; pass ``doc=`` for anything else.
    """

    def _write(name: str = "store.json", doc: Any = None) -> Path:
        path = project_root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        payload = legacy_store if doc is None else doc
        path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        return path

    return _write

"""Tests for MigrateService."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from storefrontctl.config.settings import StorefrontSettings
from storefrontctl.infrastructure.documents import DocumentWriteError
from storefrontctl.services.migrate import MigrateService


class TestMigrateCheck:
    def test_legacy_document(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        result = MigrateService(settings).check(path)
        assert result.ok
        assert result.op == "migrate_check"
        assert result.data["from_version"] == 1
        assert result.data["to_version"] == 4
        assert result.data["needs_migration"] is True
        assert len(result.data["pending"]) == 3

    def test_check_does_not_write(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        before = path.read_text()
        MigrateService(settings).check(path)
        assert path.read_text() == before

    def test_relative_path(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        store_file("pages/home.json")
        result = MigrateService(settings).check("pages/home.json")
        assert result.ok
        assert result.data["path"] == str(settings.project_root / "pages" / "home.json")

    def test_missing_document(self, settings: StorefrontSettings) -> None:
        result = MigrateService(settings).check("absent.json")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"


class TestMigrateApply:
    def test_writes_migrated_page(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        result = MigrateService(settings).apply(path)
        assert result.ok
        assert result.data["migrated"] is True
        assert result.data["written"] is True
        assert result.data["backup"] == str(path) + ".bak"

        saved = json.loads(path.read_text())
        assert saved["page"]["version"] == 4
        assert saved["page"]["layout"]["hero"]["imageHeight"] == {"mobile": 220, "desktop": 420}
        assert saved["page"]["layout"]["featured"]["columns"] == {"mobile": 2, "desktop": 4}
        assert saved["template"] == "gold-fashion"
        assert saved["settings"]["store_name"] == "Atelier Nord"

        original = json.loads(Path(result.data["backup"]).read_text())
        assert original["page"]["version"] == 1

    def test_second_run_is_a_no_op(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        svc = MigrateService(settings)
        svc.apply(path)
        after_first = path.read_text()
        result = svc.apply(path)
        assert result.ok
        assert result.data["migrated"] is False
        assert result.data["written"] is False
        assert path.read_text() == after_first

    def test_dry_run(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        before = path.read_text()
        result = MigrateService(settings).apply(path, write=False)
        assert result.ok
        assert result.data["written"] is False
        assert result.data["page"]["version"] == 4
        assert path.read_text() == before
        assert not path.with_name("store.json.bak").exists()

    def test_backup_disabled(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file()
        no_backup = settings.model_copy(update={"migrate": settings.migrate.model_copy(update={"backup": False})})
        result = MigrateService(no_backup).apply(path)
        assert result.data["backup"] is None
        assert not path.with_name("store.json.bak").exists()

    def test_future_version_warns(self, settings: StorefrontSettings, store_file: Callable[..., Path]) -> None:
        path = store_file(doc={"page": {"version": 9, "layout": {}}})
        result = MigrateService(settings).apply(path)
        assert result.ok
        assert result.data["migrated"] is False
        assert any("newer" in w for w in result.warnings)

    def test_invalid_document(self, settings: StorefrontSettings, project_root: Path) -> None:
        (project_root / "bad.json").write_text("[]")
        result = MigrateService(settings).apply("bad.json")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "INVALID_DOCUMENT"

    def test_write_failure(
        self,
        settings: StorefrontSettings,
        store_file: Callable[..., Path],
        monkeypatch: pytest.MonkeyPatch,
    ) -> None:
        path = store_file()

        def _fail(target: Path, *args: Any, **kwargs: Any) -> None:
            raise DocumentWriteError(target, f"Cannot write {target}: disk full")

        monkeypatch.setattr("storefrontctl.services.migrate.save_document", _fail)
        result = MigrateService(settings).apply(path)
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "WRITE_FAILED"
        assert result.error.detail["path"] == str(path)

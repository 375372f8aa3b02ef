"""Tests for the adapt command."""

import json
from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

from storefrontctl.cli import cli


@pytest.mark.usefixtures("project_root")
class TestAdaptCommand:
    def test_adapt(self, cli_runner: CliRunner, store_file: Callable[..., Path]) -> None:
        store_file()
        result = cli_runner.invoke(cli, ["adapt", "store.json"])
        assert result.exit_code == 0
        assert "preset: fashion-dark" in result.stdout
        assert "Atelier Nord" in result.stdout

    def test_json_camel(self, cli_runner: CliRunner, store_file: Callable[..., Path]) -> None:
        store_file()
        result = cli_runner.invoke(cli, ["--json", "adapt", "store.json", "--camel", "--no-presets"])
        data = json.loads(result.stdout)
        assert data["data"]["preset"] is None
        assert data["data"]["fields"]["heroTitle"] == "Autumn Edit"
        assert data["data"]["fields"]["backgroundColor"] == "#FFFFFF"

    def test_presets_flag_overrides_config(
        self, cli_runner: CliRunner, store_file: Callable[..., Path], project_root: Path
    ) -> None:
        (project_root / "storefrontctl.toml").write_text("[render]\napply_presets = false\n")
        store_file()
        result = cli_runner.invoke(cli, ["--json", "adapt", "store.json", "--presets"])
        assert json.loads(result.stdout)["data"]["preset"] == "fashion-dark"

    def test_invalid_document(self, cli_runner: CliRunner, project_root: Path) -> None:
        (project_root / "store.json").write_text("{broken")
        result = cli_runner.invoke(cli, ["adapt", "store.json"])
        assert result.exit_code == 1
        assert "INVALID_DOCUMENT" in result.stderr

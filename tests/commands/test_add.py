"""Tests for the add CLI command."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from rsforge.cli import cli


@pytest.mark.usefixtures("_isolated_workdir")
class TestAddCommand:
    def test_without_version(self, cli_runner: CliRunner, fake_cargo: Any, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["add", "serde"])

        assert result.exit_code == 0, result.output
        assert fake_cargo.argvs == [["add", "serde"]]
        assert fake_cargo.calls[0][1] == tmp_path

    def test_with_version(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        result = cli_runner.invoke(cli, ["add", "serde", "--version", "9.9.9"])

        assert result.exit_code == 0, result.output
        assert fake_cargo.argvs == [["add", "serde@9.9.9"]]

    def test_short_version_flag(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        result = cli_runner.invoke(cli, ["add", "uuid", "-v", "1.8.0"])
        assert result.exit_code == 0
        assert fake_cargo.argvs == [["add", "uuid@1.8.0"]]

    def test_explicit_latest_is_the_sentinel(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        cli_runner.invoke(cli, ["add", "serde", "--version", "latest"])
        assert fake_cargo.argvs == [["add", "serde"]]

    def test_json_output(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        result = cli_runner.invoke(cli, ["--json", "add", "tokio", "--version", "1.38"])
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["data"] == {"crate": "tokio", "version": "1.38", "spec": "tokio@1.38"}

    def test_failure_mirrors_exit_code(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        fake_cargo.fail_on("add", returncode=101)

        result = cli_runner.invoke(cli, ["add", "serde"])

        assert result.exit_code == 101
        assert "Failed to add serde" in result.stderr

    def test_missing_crate_is_usage_error(self, cli_runner: CliRunner, fake_cargo: Any) -> None:
        result = cli_runner.invoke(cli, ["add"])
        assert result.exit_code == 2
        assert fake_cargo.calls == []

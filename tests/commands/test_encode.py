"""Tests for the encode CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from dtneid.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestEncodeCommand:
    def test_hex(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "encode", "dtn:none"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "820100"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "encode", "ipn:1.2"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["data"]["data"] == "8202820102"
        assert data["data"]["length"] == 5

    def test_base64_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "dtneid.toml").write_text('[codec]\nbinary_format = "base64"\n')
        result = cli_runner.invoke(cli, ["-q", "encode", "dtn:none"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "ggEA"

    def test_base64_from_env(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["-q", "encode", "dtn:none"], env={"DTNEID_CODEC__BINARY_FORMAT": "base64"}
        )
        assert result.exit_code == 0
        assert result.stdout.strip() == "ggEA"

    def test_invalid_uri(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["encode", "ipn:1.2.3"])
        assert result.exit_code == 1
        assert result.stdout == ""

"""Tests for the serialize and deserialize CLI commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from scalarctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestSerializeCommand:
    def test_serialize_float(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "serialize", "Float", "1.5"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["serialized"] == 1.5

    def test_normalization_warning_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["serialize", "Date", "2024-01-01T00:00:00+00:00", "--raw-string"]
        )
        assert result.exit_code == 0
        assert "2024-01-01T00:00:00Z" in result.stdout
        assert "WARNING: Input normalized" in result.stderr

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["serialize", "Int", "1.5"])
        assert result.exit_code == 1


@pytest.mark.usefixtures("_isolated_cwd")
class TestDeserializeCommand:
    def test_deserialize_int(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "deserialize", "Int", "3.9"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["value"] == "3"
        assert data["python_type"] == "int"

    def test_malformed_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "deserialize", "Date", "yesterday", "--raw-string"]
        )
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "CONVERSION_FAILED" in result.stderr

    def test_infinite_int_reported_not_raised(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "deserialize", "Int", "1e400"])
        assert result.exit_code == 1
        assert result.exception is None or isinstance(result.exception, SystemExit)
        assert "CONVERSION_FAILED" in result.stderr

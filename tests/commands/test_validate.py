"""Tests for the validate CLI command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from scalarctl.cli import cli


@pytest.mark.usefixtures("_isolated_cwd")
class TestValidateCommand:
    def test_valid_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "Int", "42"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert "value: 42" in result.output

    def test_json_output(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "IntRange(1, 10)", "10"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["op"] == "validate"
        assert data["data"]["value"] == 10

    def test_failure_exits_nonzero_on_stderr(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["validate", "PositiveInt", "0", "--key", "age"])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "Value (0) can not be lower than 1" in result.stderr

    def test_failure_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "Boolean", '"true"', "--key", "f"])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["code"] == "VALIDATION_FAILED"
        assert data["error"]["detail"]["errors"] == ['Expected "f" to be a boolean.']

    def test_raw_string(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["--json", "validate", "Date", "2024-01-01T00:00:00Z", "--raw-string"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["value"] == "2024-01-01T00:00:00Z"

    def test_bad_date(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["validate", "Date", "not-a-date", "--raw-string", "--key", "when"]
        )
        assert result.exit_code == 1
        assert "when must be an ISO 8601-formatted date string." in result.stderr

    def test_unknown_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "validate", "Decimal", "1"])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "UNKNOWN_TYPE"

    def test_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "validate", "Float", "1.5"])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: validate"

    def test_local_plugin_scalar(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".scalarctl" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "username.py").write_text(
            "from scalarctl.domain.refinements import StringRangeType\n"
            "from scalarctl.plugins import hookimpl\n\n\n"
            "class UsernamePlugin:\n"
            "    @hookimpl\n"
            "    def register_scalar_types(self):\n"
            '        return {"Username": StringRangeType(3, 20, name="Username")}\n'
        )
        result = cli_runner.invoke(cli, ["--json", "validate", "Username", '"jo"'])
        assert result.exit_code == 1
        data = json.loads(result.stderr)
        assert data["error"]["message"] == "Value (2 chars) must have between 3 and 20 chars"

    def test_plugins_disabled_by_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        plugin_dir = tmp_path / ".scalarctl" / "plugins"
        plugin_dir.mkdir(parents=True)
        (plugin_dir / "boom.py").write_text("raise RuntimeError('should not load')\n")
        (tmp_path / "scalarctl.toml").write_text("[plugins]\nenabled = false\n")
        result = cli_runner.invoke(cli, ["validate", "Int", "1"])
        assert result.exit_code == 0

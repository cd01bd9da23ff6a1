"""Unit tests for the config commands."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from todaywidget.commands.config_command import _parse_value, app

runner = CliRunner()


@pytest.fixture()
def run(tmp_config):
    def _run(args: list[str], **kwargs):
        with patch(
            "todaywidget.commands.config_command.get_config_service",
            return_value=tmp_config,
        ):
            return runner.invoke(app, args, **kwargs)

    return _run


class TestParseValue:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("none", None), ("NULL", None), ("42", "42"), ("true", "true"), ("UTC", "UTC")],
    )
    def test_types(self, raw, expected):
        assert _parse_value(raw) == expected


class TestConfigCommands:
    def test_show(self, run):
        result = run(["show"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["display"]["output"] == "pretty"

    def test_set(self, run, tmp_config):
        result = run(["set", "display.timezone", "UTC"])
        assert result.exit_code == 0, result.output
        assert tmp_config.config.display.timezone == "UTC"

    def test_set_none_clears(self, run, tmp_config):
        tmp_config.set("display.timezone", "UTC")
        result = run(["set", "display.timezone", "none"])
        assert result.exit_code == 0, result.output
        assert tmp_config.config.display.timezone is None

    def test_set_invalid_value(self, run):
        result = run(["set", "display.timezone", "Nowhere/Special"])
        assert result.exit_code == 2
        assert "Invalid value for 'display.timezone'" in result.output

    def test_set_unknown_key(self, run):
        result = run(["set", "display.font", "Menlo"])
        assert result.exit_code == 5
        assert "Unknown configuration key" in result.output

    def test_reset_with_yes(self, run, tmp_config):
        tmp_config.set("display.output", "json")
        result = run(["reset", "--yes"])
        assert result.exit_code == 0, result.output
        assert tmp_config.config.display.output == "pretty"

    def test_reset_declined(self, run, tmp_config):
        tmp_config.set("display.output", "json")
        result = run(["reset"], input="n\n")
        assert result.exit_code == 0
        assert tmp_config.config.display.output == "json"

    def test_set_numeric_looking_path_stays_text(self, run, tmp_config):
        result = run(["set", "store.path", "2024"])
        assert result.exit_code == 0, result.output
        assert tmp_config.config.store.path == "2024"

    def test_get_value(self, run, tmp_config):
        tmp_config.set("display.timezone", "UTC")
        result = run(["get", "display.timezone"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == "UTC"

    def test_get_section(self, run):
        result = run(["get", "display"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["output"] == "pretty"

    def test_get_unknown_key_is_not_found(self, run):
        result = run(["get", "store.url"])
        assert result.exit_code == 5
        assert "Unknown configuration key" in result.output

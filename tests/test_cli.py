"""CLI behaviour coverage for the rich-click commands."""

from __future__ import annotations

import json
import re
import sys
from typing import Callable

import lib_cli_exit_tools
import pytest
from click.testing import CliRunner

from lib_log_args import __init__conf__
from lib_log_args import cli as cli_mod
from lib_log_args.demo import run_demo
from lib_log_args.domain.levels import SeverityLevel
from lib_log_args.domain.options import ConfigurationError, WrapOptions

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    """Return ``text`` without ANSI colour codes.

    Examples
    --------
    >>> strip_ansi("\x1b[31mred\x1b[0m")
    'red'
    """

    return ANSI_RE.sub("", text)


def test_cli_without_subcommand_prints_banner() -> None:
    result = CliRunner().invoke(cli_mod.cli, [])

    assert result.exit_code == 0
    assert "Info for lib_log_args:" in result.output


def test_cli_info_command_lists_version() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["info"])

    assert result.exit_code == 0
    assert __init__conf__.version in result.output


def test_cli_version_option() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["--version"])

    assert result.exit_code == 0
    assert __init__conf__.version in result.output


def test_cli_no_traceback_option(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    result = CliRunner().invoke(cli_mod.cli, ["--no-traceback", "info"])

    assert result.exit_code == 0
    assert lib_cli_exit_tools.config.traceback is False
    assert lib_cli_exit_tools.config.traceback_force_color is False


def test_cli_demo_prints_calls_and_records() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo"])

    assert result.exit_code == 0
    output = strip_ansi(result.output)
    assert "several strings (info) returned 'a'" in output
    assert "suppressed: nothing written" in output
    assert '"msg": "a b c"' in output
    assert '"isError": true' in output


def test_cli_demo_honours_key_options() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--payload-key", "data", "--always-show-error-indicator"])

    assert result.exit_code == 0
    output = strip_ansi(result.output)
    assert '"data": {"foo": "bar"}' in output
    assert '"isError": false' in output


def test_cli_demo_rejects_reserved_payload_key() -> None:
    result = CliRunner().invoke(cli_mod.cli, ["demo", "--payload-key", "time"])

    assert result.exit_code != 0
    assert isinstance(result.exception, ConfigurationError)


def test_run_demo_threshold_suppresses_writes() -> None:
    outcomes = run_demo(options=WrapOptions(), threshold=SeverityLevel.ERROR)
    written = {outcome.label for outcome in outcomes if outcome.line is not None}

    assert written == {"exception"}
    assert json.loads(next(outcome.line for outcome in outcomes if outcome.line))["isError"] is True


def test_main_restores_traceback_preferences(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", True, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", True, raising=False)

    recorded: dict[str, bool] = {}

    def fake_run_cli(command: Callable[..., int], argv: list[str] | None = None, *, prog_name: str | None = None, **_: object) -> int:
        result = CliRunner().invoke(command, ["--no-traceback", "info"] if argv is None else argv)
        if result.exception is not None:
            raise result.exception
        recorded["traceback"] = lib_cli_exit_tools.config.traceback
        recorded["traceback_force_color"] = lib_cli_exit_tools.config.traceback_force_color
        return result.exit_code

    monkeypatch.setattr(lib_cli_exit_tools, "run_cli", fake_run_cli)

    exit_code = cli_mod.main(["--no-traceback", "info"])

    assert exit_code == 0
    assert recorded == {"traceback": False, "traceback_force_color": False}
    assert lib_cli_exit_tools.config.traceback is True
    assert lib_cli_exit_tools.config.traceback_force_color is True


def test_main_consumes_sys_argv(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback", False, raising=False)
    monkeypatch.setattr(lib_cli_exit_tools.config, "traceback_force_color", False, raising=False)
    monkeypatch.setattr(sys, "argv", [__init__conf__.shell_command, "info"], raising=False)

    exit_code = cli_mod.main()
    captured = capsys.readouterr()

    assert exit_code == 0
    assert "Info for lib_log_args" in captured.out

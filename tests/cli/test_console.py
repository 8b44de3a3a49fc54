# topmark:header:start
#
#   project      : tomlsway
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Program-output console and color resolution."""

from __future__ import annotations

import io

import pytest

from tests.conftest import parametrize
from tomlsway.cli.console import ClickConsole
from tomlsway.cli.options import ColorMode, resolve_color_mode


def _console(verbosity: int = 0) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=False, verbosity=verbosity, out=out, err=err), out, err


def test_print_goes_to_stdout_and_info_to_stderr() -> None:
    console, out, err = _console()
    console.print("bindsym $mod+q kill")
    console.info("Wrote config")

    assert out.getvalue() == "bindsym $mod+q kill\n"
    assert err.getvalue() == "Wrote config\n"


def test_quiet_console_drops_info_but_not_errors() -> None:
    console, _out, err = _console(verbosity=-1)
    console.info("Wrote config")
    console.error("Error: boom")

    assert err.getvalue() == "Error: boom\n"


def test_styled_is_plain_without_color() -> None:
    console, _out, _err = _console()
    assert console.styled("0.1.0", bold=True) == "0.1.0"


@parametrize(
    "mode, expected",
    [(ColorMode.ALWAYS, True), (ColorMode.NEVER, False)],
)
def test_explicit_color_mode_wins(
    monkeypatch: pytest.MonkeyPatch, mode: ColorMode, expected: bool
) -> None:
    monkeypatch.setenv("FORCE_COLOR", "1")
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=mode, stdout_isatty=not expected) is expected


def test_auto_color_mode_honours_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is False

    monkeypatch.delenv("NO_COLOR")
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=False) is True

    monkeypatch.delenv("FORCE_COLOR")
    assert resolve_color_mode(cli_mode=ColorMode.AUTO, stdout_isatty=True) is True

# topmark:header:start
#
#   project      : tomlsway
#   file         : errors.py
#   file_relpath : src/tomlsway/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the tomlsway CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Core exceptions (decode errors, TOML syntax
    errors, reload failures) are translated into these at the command layer.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from tomlsway.core.exit_codes import ExitCode


class TomlswayError(click.ClickException):
    """Base class for all tomlsway CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text (colorized in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class TomlswayUsageError(TomlswayError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TomlswayDecodeError(TomlswayError):
    """The TOML document does not describe valid sway commands."""

    exit_code = ExitCode.DECODE_ERROR


class TomlswayFileNotFoundError(TomlswayError):
    """Error when the input document does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TomlswayReloadError(TomlswayError):
    """The compositor reload command failed."""

    exit_code = ExitCode.RELOAD_ERROR


class TomlswayIOError(TomlswayError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TomlswayConfigError(TomlswayError):
    """The input is not a valid TOML document."""

    exit_code = ExitCode.CONFIG_ERROR

# topmark:header:start
#
#   project      : tomlsway
#   file         : cmd_common.py
#   file_relpath : src/tomlsway/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands: path
resolution, loading and decoding a document, and writing results. Core
exceptions are translated here into the CLI exceptions of
[`tomlsway.cli.errors`][tomlsway.cli.errors], so command bodies stay free of
try/except plumbing.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from tomlsway.cli.errors import (
    TomlswayConfigError,
    TomlswayDecodeError,
    TomlswayFileNotFoundError,
    TomlswayIOError,
    TomlswayReloadError,
)
from tomlsway.config.io import TomlSyntaxError, load_toml_file, write_text_atomic
from tomlsway.config.logging import get_logger
from tomlsway.config.paths import default_input_path, default_output_path
from tomlsway.constants import STDOUT_MARKER
from tomlsway.core.errors import DecodeError
from tomlsway.decode import decode_document
from tomlsway.reload import ReloadError, reload_compositor

if TYPE_CHECKING:
    from tomlsway.cli.console import ClickConsole
    from tomlsway.model.document import ConfigDocument

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def resolve_input_path(input_path: Path | None) -> Path:
    """Return ``input_path`` or the default XDG location when omitted."""
    return input_path if input_path is not None else default_input_path()


def resolve_output_target(input_path: Path, output: str | None) -> Path | None:
    """Return the output path, or None when writing to standard output."""
    if output == STDOUT_MARKER:
        return None
    if output is None:
        return default_output_path(input_path)
    return Path(output)


def load_document(input_path: Path) -> ConfigDocument:
    """Read, parse and decode the TOML document at ``input_path``.

    Raises:
        TomlswayFileNotFoundError: The file does not exist.
        TomlswayIOError: The file cannot be read.
        TomlswayConfigError: The file is not valid TOML.
        TomlswayDecodeError: The document does not describe valid sway commands.
    """
    try:
        tree = load_toml_file(input_path)
    except FileNotFoundError as exc:
        raise TomlswayFileNotFoundError(f"No such file: {input_path}") from exc
    except TomlSyntaxError as exc:
        raise TomlswayConfigError(str(exc)) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise TomlswayIOError(f"Cannot read {input_path}: {exc}") from exc

    try:
        return decode_document(tree)
    except DecodeError as exc:
        logger.debug("Decode failed at %r", exc.location)
        raise TomlswayDecodeError(f"{input_path}: {exc}") from exc


def write_output(target: Path | None, text: str, console: ClickConsole) -> None:
    """Write ``text`` to ``target``, or print it when ``target`` is None."""
    if target is None:
        console.print(text, nl=False)
        return
    try:
        write_text_atomic(target, text)
    except OSError as exc:
        raise TomlswayIOError(f"Cannot write {target}: {exc}") from exc
    console.info(f"Wrote {target}")


def read_existing(target: Path) -> str | None:
    """Return the current content of ``target``, or None if it does not exist."""
    try:
        return target.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise TomlswayIOError(f"Cannot read {target}: {exc}") from exc


def run_reload(console: ClickConsole) -> None:
    try:
        reload_compositor()
    except ReloadError as exc:
        raise TomlswayReloadError(f"Reload failed: {exc}") from exc
    console.info("Reloaded sway")

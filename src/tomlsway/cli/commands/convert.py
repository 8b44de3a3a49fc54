# topmark:header:start
#
#   project      : tomlsway
#   file         : convert.py
#   file_relpath : src/tomlsway/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway `convert` command.

Decodes a TOML document, renders the sway configuration and writes it next to
the input (``config.toml`` -> ``config``). Nothing is written unless the whole
document decodes.

Exit codes:
    - ``0``: written (or, with ``--check``, already up to date).
    - ``2``: with ``--check``, the output file is missing or out of date.
    - see [`ExitCode`][tomlsway.core.exit_codes.ExitCode] for errors.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tomlsway.cli.cmd_common import (
    get_console,
    load_document,
    read_existing,
    resolve_input_path,
    resolve_output_target,
    run_reload,
    write_output,
)
from tomlsway.cli.errors import TomlswayUsageError
from tomlsway.cli.options import input_argument, output_option
from tomlsway.config.logging import get_logger
from tomlsway.core.exit_codes import ExitCode
from tomlsway.rendering import render_document

if TYPE_CHECKING:
    from pathlib import Path

logger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert a TOML document into a sway configuration file.",
)
@input_argument
@output_option
@click.option(
    "--reload/--no-reload",
    "reload",
    default=False,
    help="Run 'swaymsg reload' after a successful write.",
)
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with status 2 if the output file would change.",
)
def convert_command(
    *,
    input_path: Path | None,
    output: str | None,
    reload: bool,
    check: bool,
) -> None:
    """Convert a TOML document into a sway configuration file."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    source: Path = resolve_input_path(input_path)
    target: Path | None = resolve_output_target(source, output)
    if check and target is None:
        raise TomlswayUsageError("'--check' cannot be combined with '--output -'.")
    if check and reload:
        raise TomlswayUsageError("'--check' and '--reload' are mutually exclusive.")

    logger.info("Converting %s", source)
    text: str = render_document(load_document(source))

    if check:
        assert target is not None
        if read_existing(target) == text:
            console.info(f"{target} is up to date")
            return
        console.info(f"{target} would change")
        ctx.exit(ExitCode.WOULD_CHANGE)

    write_output(target, text, console)
    if reload:
        run_reload(console)

# topmark:header:start
#
#   project      : tomlsway
#   file         : defaults.py
#   file_relpath : src/tomlsway/cli/commands/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway `defaults` command.

Renders the built-in default configuration, to standard output unless
``--output`` names a file.
"""

from __future__ import annotations

from pathlib import Path

import click

from tomlsway.cli.cmd_common import get_console, write_output
from tomlsway.cli.options import output_option
from tomlsway.constants import STDOUT_MARKER
from tomlsway.defaults import default_document
from tomlsway.rendering import render_document


@click.command(
    name="defaults",
    help="Print the default sway configuration.",
)
@output_option
@click.option("--mod", "mod_key", default="Mod4", show_default=True, help="Modifier key for $mod.")
@click.option("--term", "terminal", default="foot", show_default=True, help="Terminal for $term.")
@click.option(
    "--menu", "launcher", default="wmenu-run", show_default=True, help="Launcher for $menu."
)
def defaults_command(*, output: str | None, mod_key: str, terminal: str, launcher: str) -> None:
    """Print the default sway configuration."""
    console = get_console(click.get_current_context())
    text: str = render_document(
        default_document(mod_key=mod_key, terminal=terminal, launcher=launcher)
    )
    target: Path | None = None if output in (None, STDOUT_MARKER) else Path(output)
    write_output(target, text, console)

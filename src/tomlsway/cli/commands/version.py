# topmark:header:start
#
#   project      : tomlsway
#   file         : version.py
#   file_relpath : src/tomlsway/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway `version` command.

Prints the current tomlsway version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from tomlsway.cli.cmd_common import get_console
from tomlsway.constants import TOMLSWAY_VERSION


@click.command(
    name="version",
    help="Show the current version of tomlsway.",
)
def version_command() -> None:
    """Show the current version of tomlsway."""
    console = get_console(click.get_current_context())
    console.print(console.styled(TOMLSWAY_VERSION, bold=True))

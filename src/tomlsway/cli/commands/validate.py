# topmark:header:start
#
#   project      : tomlsway
#   file         : validate.py
#   file_relpath : src/tomlsway/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway `validate` command.

Decodes a TOML document without rendering or writing anything.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tomlsway.cli.cmd_common import get_console, load_document, resolve_input_path
from tomlsway.cli.options import input_argument

if TYPE_CHECKING:
    from pathlib import Path

    from tomlsway.model.document import ConfigDocument


@click.command(
    name="validate",
    help="Check that a TOML document describes valid sway commands.",
)
@input_argument
def validate_command(*, input_path: Path | None) -> None:
    """Check that a TOML document describes valid sway commands."""
    console = get_console(click.get_current_context())
    source: Path = resolve_input_path(input_path)
    document: ConfigDocument = load_document(source)
    count: int = sum(1 for _command in document.commands())
    console.info(f"{source}: OK ({count} commands)")

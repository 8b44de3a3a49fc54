# topmark:header:start
#
#   project      : tomlsway
#   file         : tokens.py
#   file_relpath : src/tomlsway/cli/commands/tokens.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway `tokens` command.

Lists the tokens accepted by each value domain (directions, layouts, bind
flags, ...) with their descriptions. Useful when writing a TOML document by
hand.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from tomlsway.cli.cmd_common import get_console
from tomlsway.cli.errors import TomlswayUsageError
from tomlsway.model.domains import DOMAINS

if TYPE_CHECKING:
    from tomlsway.cli.console import ClickConsole
    from tomlsway.model.domains import ValueDomain


def describe_domain(domain: type[ValueDomain], *, show_aliases: bool = False) -> list[str]:
    """Return one line per member: canonical token, then its label.

    Args:
        domain (type[ValueDomain]): The value domain to describe.
        show_aliases (bool): Append the accepted aliases of each member.

    Returns:
        list[str]: The formatted lines, tokens padded to a common width.
    """
    width: int = max(len(member.key) for member in domain)
    lines: list[str] = []
    for member in domain:
        line: str = f"{member.key:<{width}}  {member.label}"
        if show_aliases and member.aliases:
            line += f" (aliases: {', '.join(member.aliases)})"
        lines.append(line)
    return lines


@click.command(
    name="tokens",
    help="List the tokens accepted by each value domain.",
    epilog="""
Tokens are matched case-insensitively; '-', '_' and spaces are interchangeable.
The generated configuration always uses the canonical token shown first.
""",
)
@click.argument("domain_name", metavar="[DOMAIN]", required=False)
@click.option("--long", "show_aliases", is_flag=True, help="Also show accepted aliases.")
def tokens_command(*, domain_name: str | None, show_aliases: bool) -> None:
    """List the tokens of every value domain, or of the one named."""
    console: ClickConsole = get_console(click.get_current_context())

    domains: tuple[type[ValueDomain], ...] = DOMAINS
    if domain_name is not None:
        domains = tuple(d for d in DOMAINS if d.__name__.lower() == domain_name.lower())
        if not domains:
            names: str = ", ".join(d.__name__ for d in DOMAINS)
            raise TomlswayUsageError(f"Unknown domain {domain_name!r} (expected one of {names})")

    for index, domain in enumerate(domains):
        if index:
            console.print()
        console.print(console.styled(f"{domain.__name__}:", bold=True))
        for line in describe_domain(domain, show_aliases=show_aliases):
            console.print(f"  {line}")

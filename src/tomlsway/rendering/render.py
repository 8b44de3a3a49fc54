# topmark:header:start
#
#   project      : tomlsway
#   file         : render.py
#   file_relpath : src/tomlsway/rendering/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical renderer.

Rendering is a pure function of the command sequence: every command is encoded
with its own ``encode()`` and the results are joined with single newlines.
Rendering the same sequence twice yields byte-identical text.

The whole-file variant lays a [`ConfigDocument`][tomlsway.model.document.ConfigDocument]
out as a banner followed by one section per non-empty group of commands::

    # <banner line>
    # ...
    <blank>
    # <section header line>
    <command>
    ...
    <blank>

Empty sections are omitted entirely, header included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tomlsway.config.logging import get_logger
from tomlsway.constants import DEFAULT_BANNER
from tomlsway.model.commands import Blank, Comment

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

    from tomlsway.config.logging import TomlswayLogger
    from tomlsway.model.commands import Command
    from tomlsway.model.document import ConfigDocument

logger: TomlswayLogger = get_logger(__name__)

SECTION_HEADERS: Mapping[str, tuple[str, ...]] = {
    "set": ("Variables from the [set] table",),
    "include": (
        "Files included from the include array",
        "Note: any included TOML documents must be converted as well",
    ),
    "exec": (
        "Startup commands from the exec array",
        "Note: these run once at startup, NOT on reload",
        "Use exec-always for commands that must run on every reload",
    ),
    "exec-always": (
        "Startup commands from the exec-always array",
        "These run again on every reload",
    ),
    "bindsym": ("Key bindings from the [bindsym] table",),
    "bindcode": ("Key code bindings from the [bindcode] table",),
    "bar": ("Swaybar configuration from the [bar] table",),
}


def render(commands: Iterable[Command]) -> str:
    """Render commands as configuration text, one encoding per line."""
    return "\n".join(command.encode() for command in commands)


def comment_block(lines: Sequence[str]) -> list[Command]:
    """Turn header text lines into comment commands (``""`` renders as ``#``)."""
    return [Comment(line) for line in lines]


def document_commands(
    document: ConfigDocument,
    *,
    banner: Sequence[str] = DEFAULT_BANNER,
) -> list[Command]:
    """Lay a document out as the full command sequence of a configuration file.

    Args:
        document (ConfigDocument): The decoded (or constructed) document.
        banner (Sequence[str]): File-wide banner lines; empty for no banner.

    Returns:
        list[Command]: Banner, then every non-empty section with its header,
        each followed by a single blank line.
    """
    out: list[Command] = []
    if banner:
        out.extend(comment_block(banner))
        out.append(Blank())
    for key, commands in document.sections():
        if not commands:
            logger.trace("Section %r is empty; omitted", key)
            continue
        out.extend(comment_block(SECTION_HEADERS[key]))
        out.extend(commands)
        out.append(Blank())
    return out


def render_document(
    document: ConfigDocument,
    *,
    banner: Sequence[str] = DEFAULT_BANNER,
) -> str:
    """Render a whole configuration file.

    Every emitted block (banner or section) is followed by one blank line,
    including the last one.
    """
    text: str = render(document_commands(document, banner=banner))
    if text:
        text += "\n"
    logger.debug("Rendered %d lines", text.count("\n"))
    return text

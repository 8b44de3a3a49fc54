# topmark:header:start
#
#   project      : tomlsway
#   file         : loaders.py
#   file_relpath : src/tomlsway/config/io/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML documents.

Parsing is done with `tomlkit` and returned as plain `dict` structures, so the
decoder only sees ``dict``/``list``/``str``/``int``/``bool`` nodes (plus any
float or date values, which the decoder rejects as incorrect types).

Unlike configuration loaders that fall back to defaults, a broken sway TOML
document must never produce a config file; parse failures are raised as
`TomlSyntaxError` for the CLI to report.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from tomlsway.config.io.guards import is_toml_table
from tomlsway.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from tomlsway.config.io.types import TomlTable
    from tomlsway.config.logging import TomlswayLogger

logger: TomlswayLogger = get_logger(__name__)


class TomlSyntaxError(ValueError):
    """The input is not a syntactically valid TOML document.

    Attributes:
        source (str): Where the text came from (a path or ``<string>``).
        line (int | None): 1-based line of the error, when tomlkit reports one.
        col (int | None): 1-based column of the error, when tomlkit reports one.
    """

    def __init__(self, source: str, detail: str, line: int | None = None, col: int | None = None):
        super().__init__(f"{source}: invalid TOML: {detail}")
        self.source: str = source
        self.line: int | None = line
        self.col: int | None = col


def load_toml_text(text: str, *, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain Python dict.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages.

    Returns:
        TomlTable: The parsed document with all tomlkit containers unwrapped.

    Raises:
        TomlSyntaxError: If ``text`` is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.debug("Error decoding TOML from %s: %s", source, e)
        raise TomlSyntaxError(source, str(e), e.line, e.col) from e

    data_any: Any = doc.unwrap()
    if not is_toml_table(data_any):
        raise TomlSyntaxError(source, "document root is not a table")
    logger.trace("Loaded %d top-level keys from %s", len(data_any), source)
    return data_any


def load_toml_file(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to the TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        OSError: If the file cannot be read.
        TomlSyntaxError: If the file is not valid TOML.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    text: str = path.read_text(encoding="utf-8")
    logger.debug("Read %d characters from %s", len(text), path)
    return load_toml_text(text, source=str(path))

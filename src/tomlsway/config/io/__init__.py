# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/config/io/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML document I/O.

Submodules:
    types: shared type aliases for parsed TOML values.
    guards: `TypeGuard` predicates used by the decoder.
    loaders: parse TOML text/files into plain Python structures.
    writer: atomic text writes.
"""

from __future__ import annotations

from tomlsway.config.io.loaders import TomlSyntaxError, load_toml_file, load_toml_text
from tomlsway.config.io.writer import write_text_atomic

__all__ = [
    "TomlSyntaxError",
    "load_toml_file",
    "load_toml_text",
    "write_text_atomic",
]

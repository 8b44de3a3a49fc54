# topmark:header:start
#
#   project      : tomlsway
#   file         : guards.py
#   file_relpath : src/tomlsway/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type guards for parsed TOML values.

This module provides `TypeGuard`-based predicates that help Pyright narrow runtime
values coming from TOML parsing. The loader unwraps `tomlkit` containers before
decoding, so these guards only deal with plain Python values.

Note that ``bool`` is a subclass of ``int`` in Python; `is_toml_int` excludes it
so a TOML boolean is never accepted where an integer is expected.
"""

from __future__ import annotations

from typing import Any, TypeGuard

from tomlsway.config.io.types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value.

    Checks only that the value is a ``list``; does not validate item types.
    """
    return isinstance(obj, list)


def is_toml_str(obj: object) -> TypeGuard[str]:
    return isinstance(obj, str)


def is_toml_int(obj: object) -> TypeGuard[int]:
    """Type guard for a TOML integer (booleans excluded)."""
    return isinstance(obj, int) and not isinstance(obj, bool)


def is_toml_bool(obj: object) -> TypeGuard[bool]:
    return isinstance(obj, bool)

# topmark:header:start
#
#   project      : tomlsway
#   file         : config.py
#   file_relpath : src/tomlsway/decode/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode a whole configuration document.

Top-level keys of the document and their shapes:

| Key           | Shape                                                       |
|---------------|-------------------------------------------------------------|
| ``set``       | table of variable name to string (or integer) value         |
| ``include``   | string, or array of strings                                 |
| ``exec``      | exec shape, or array of exec shapes (string or table)       |
| ``exec-always`` | same as ``exec``                                          |
| ``bindsym``   | table of key combination to binding entry                   |
| ``bindcode``  | table of key code combination to binding entry              |
| ``bar``       | table ``{id?, status-command}``                             |

``version`` is document metadata and is ignored; any other key is rejected
with `UnknownKeyError`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from tomlsway.config.logging import get_logger
from tomlsway.config.paths import strip_toml_suffix
from tomlsway.core.errors import UnknownKeyError
from tomlsway.decode.base import (
    NodeShape,
    as_str,
    as_table,
    each,
    field,
    field_opt,
    located,
    one_of_type,
)
from tomlsway.decode.runtime import decode_binding, decode_exec_args
from tomlsway.model.commands import (
    Bar,
    Binding,
    Bindcode,
    Bindsym,
    Exec,
    ExecAlways,
    Include,
    Set,
)
from tomlsway.model.document import ConfigDocument

if TYPE_CHECKING:
    from tomlsway.config.io.types import TomlTable
    from tomlsway.config.logging import TomlswayLogger
    from tomlsway.model.commands import Command

logger: TomlswayLogger = get_logger(__name__)

TOP_LEVEL_KEYS: tuple[str, ...] = (
    "set",
    "include",
    "exec",
    "exec-always",
    "bindsym",
    "bindcode",
    "bar",
)
IGNORED_KEYS: tuple[str, ...] = ("version",)

_B = TypeVar("_B", bound=Binding)


def _decode_set_value(node: Any) -> str:
    return one_of_type(
        node,
        (NodeShape.STRING, lambda s: s),
        (NodeShape.INTEGER, str),
    )


def _decode_sets(node: Any) -> tuple[Set, ...]:
    table: TomlTable = as_table(node)
    return tuple(Set(name, field(table, name, _decode_set_value)) for name in table)


def _decode_include(node: Any) -> Include:
    path: str = as_str(node)
    stripped: str = strip_toml_suffix(path)
    if stripped != path:
        logger.warning(
            "include %r points at a TOML document; including %r instead "
            "(translate that document too)",
            path,
            stripped,
        )
    return Include(stripped)


def _decode_includes(node: Any) -> tuple[Include, ...]:
    return one_of_type(
        node,
        (NodeShape.STRING, lambda s: (_decode_include(s),)),
        (NodeShape.ARRAY, lambda items: tuple(each(items, _decode_include))),
    )


def _decode_execs(node: Any) -> tuple[tuple[str, tuple[Any, ...]], ...]:
    """Decode a single exec shape or an array of them."""
    return one_of_type(
        node,
        (NodeShape.ARRAY, lambda items: tuple(each(items, decode_exec_args))),
        (NodeShape.STRING, lambda s: (decode_exec_args(s),)),
        (NodeShape.TABLE, lambda t: (decode_exec_args(t),)),
    )


def _decode_bindings(node: Any, binding_cls: type[_B]) -> tuple[_B, ...]:
    table: TomlTable = as_table(node)
    return tuple(
        located(combo, lambda entry, c=combo: decode_binding(c, entry, binding_cls), value)
        for combo, value in table.items()
    )


def _decode_bar(node: Any) -> Bar:
    table: TomlTable = as_table(node)
    return Bar(
        id=field_opt(table, "id", as_str, ""),
        status_command=field(table, "status-command", as_str),
    )


def decode_document(tree: Any) -> ConfigDocument:
    """Decode a parsed TOML document into a grouped configuration document.

    Args:
        tree (Any): The document root, a plain ``dict``.

    Returns:
        ConfigDocument: The grouped commands.

    Raises:
        DecodeError: The first structural error found; no partial result is returned.
    """
    table: TomlTable = as_table(tree)
    for key in table:
        if key not in TOP_LEVEL_KEYS and key not in IGNORED_KEYS:
            raise UnknownKeyError(key, TOP_LEVEL_KEYS)

    execs = field_opt(table, "exec", _decode_execs, ())
    exec_always = field_opt(table, "exec-always", _decode_execs, ())
    document = ConfigDocument(
        sets=field_opt(table, "set", _decode_sets, ()),
        includes=field_opt(table, "include", _decode_includes, ()),
        execs=tuple(Exec(command, flags) for command, flags in execs),
        exec_always=tuple(ExecAlways(command, flags) for command, flags in exec_always),
        bindsyms=field_opt(table, "bindsym", lambda n: _decode_bindings(n, Bindsym), ()),
        bindcodes=field_opt(table, "bindcode", lambda n: _decode_bindings(n, Bindcode), ()),
        bar=field_opt(table, "bar", _decode_bar, None),
    )
    logger.debug(
        "Decoded document: %d set, %d include, %d exec, %d exec-always, "
        "%d bindsym, %d bindcode, bar=%s",
        len(document.sets),
        len(document.includes),
        len(document.execs),
        len(document.exec_always),
        len(document.bindsyms),
        len(document.bindcodes),
        document.bar is not None,
    )
    return document


def decode(tree: Any) -> list[Command]:
    """Decode a parsed TOML document into its flat command sequence."""
    return list(decode_document(tree).commands())

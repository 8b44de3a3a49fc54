# topmark:header:start
#
#   project      : tomlsway
#   file         : base.py
#   file_relpath : src/tomlsway/decode/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared decoding combinators.

The decoder walks a plain Python tree (``dict``/``list``/``str``/``int``/``bool``)
produced by [`load_toml_text`][tomlsway.config.io.loaders.load_toml_text].
Everything here is pure; errors are raised as soon as they are found and carry
the location of the failing node (see [`DecodeError.at`][tomlsway.core.errors.DecodeError.at]).

Two combinators implement the dispatch rules:

- [`one_of`][tomlsway.decode.base.one_of]: "exactly one discriminant key". The
  keys of a table are intersected with a registry of discriminants; exactly one
  match is dispatched, zero raises ``KeyNotFoundError`` and more than one
  raises ``MultiKeyError``. Ambiguity is never resolved by precedence.
- [`one_of_type`][tomlsway.decode.base.one_of_type]: "first structural match".
  A node that may take several shapes (e.g. ``floating = true`` or
  ``floating = "toggle"``) is matched against an ordered list of
  ``(shape, decoder)`` branches; the first branch whose shape matches decodes
  the node and its errors propagate unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from tomlsway.config.io.guards import (
    is_any_list,
    is_toml_bool,
    is_toml_int,
    is_toml_str,
    is_toml_table,
)
from tomlsway.config.logging import get_logger
from tomlsway.core.enum_mixins import KeyedStrEnum
from tomlsway.core.errors import (
    DecodeError,
    IncorrectTypeError,
    KeyNotFoundError,
    MultiKeyError,
    UnknownKeyError,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Mapping

    from tomlsway.config.io.types import TomlTable
    from tomlsway.config.logging import TomlswayLogger

logger: TomlswayLogger = get_logger(__name__)

T = TypeVar("T")

Decoder = Callable[[Any], T]


class NodeShape(KeyedStrEnum):
    """Structural shapes of input nodes."""

    TABLE = ("table", "Table")
    ARRAY = ("array", "Array")
    STRING = ("string", "String")
    INTEGER = ("integer", "Integer")
    BOOLEAN = ("boolean", "Boolean")

    def matches(self, node: object) -> bool:
        """Return True if ``node`` has this shape (booleans are never integers)."""
        if self is NodeShape.TABLE:
            return is_toml_table(node)
        if self is NodeShape.ARRAY:
            return is_any_list(node)
        if self is NodeShape.STRING:
            return is_toml_str(node)
        if self is NodeShape.INTEGER:
            return is_toml_int(node)
        return is_toml_bool(node)


def shape_name(node: object) -> str:
    """Return the shape name of ``node`` for error messages."""
    for shape in NodeShape:
        if shape.matches(node):
            return shape.value
    return type(node).__name__


def located(key: str, decoder: Decoder[T], node: Any) -> T:
    """Run ``decoder(node)`` and prefix any decode error with ``key``."""
    try:
        return decoder(node)
    except DecodeError as exc:
        raise exc.at(key) from None


# --- lookups -------------------------------------------------------------------


def find(table: TomlTable, key: str) -> Any:
    """Return ``table[key]`` or raise ``KeyNotFoundError(key)``."""
    if key not in table:
        raise KeyNotFoundError(key)
    return table[key]


def find_opt(table: TomlTable, key: str) -> Any | None:
    return table.get(key)


def field(table: TomlTable, key: str, decoder: Decoder[T]) -> T:
    """Decode the required field ``key`` of ``table``.

    A missing key raises ``KeyNotFoundError`` at the table's location; an
    invalid value raises the decoder's error located at ``key``.
    """
    return located(key, decoder, find(table, key))


def field_opt(table: TomlTable, key: str, decoder: Decoder[T], default: T) -> T:
    """Decode the optional field ``key`` of ``table``, or return ``default``."""
    if key not in table:
        return default
    return located(key, decoder, table[key])


def reject_unknown(table: TomlTable, allowed: Collection[str]) -> None:
    """Raise ``UnknownKeyError`` for the first key of ``table`` not in ``allowed``."""
    for key in table:
        if key not in allowed:
            raise UnknownKeyError(key, sorted(allowed))


# --- shape checks --------------------------------------------------------------


def as_type(node: Any, *shapes: NodeShape) -> Any:
    """Return ``node`` if it matches one of ``shapes``.

    Raises:
        IncorrectTypeError: Naming every accepted shape and the shape found.
    """
    if any(shape.matches(node) for shape in shapes):
        return node
    raise IncorrectTypeError([shape.value for shape in shapes], shape_name(node))


def as_table(node: Any) -> TomlTable:
    return as_type(node, NodeShape.TABLE)


def as_array(node: Any) -> list[Any]:
    return as_type(node, NodeShape.ARRAY)


def as_str(node: Any) -> str:
    return as_type(node, NodeShape.STRING)


def as_int(node: Any) -> int:
    return as_type(node, NodeShape.INTEGER)


def as_uint(node: Any) -> int:
    """Return ``node`` as a non-negative integer."""
    value: int = as_int(node)
    if value < 0:
        raise IncorrectTypeError(["non-negative integer"], str(value))
    return value


def as_bool(node: Any) -> bool:
    return as_type(node, NodeShape.BOOLEAN)


def each(node: Any, decoder: Decoder[T]) -> list[T]:
    """Decode every element of an array, locating errors by element index."""
    return [located(str(index), decoder, item) for index, item in enumerate(as_array(node))]


def as_empty_table(node: Any) -> None:
    """Accept ``{}`` only (used by argument-less commands)."""
    table: TomlTable = as_table(node)
    if table:
        raise IncorrectTypeError(["empty table"], "table")


def as_unit(node: Any) -> None:
    """Accept a boolean or an empty table, the spellings of an argument-less command.

    ``exit = true``, ``exit = false`` and ``exit = {}`` all select the command;
    the boolean value carries no meaning.
    """
    one_of_type(
        node,
        (NodeShape.BOOLEAN, lambda _node: None),
        (NodeShape.TABLE, as_empty_table),
    )


# --- dispatch ------------------------------------------------------------------


def select_key(table: TomlTable, registry: Collection[str]) -> str:
    """Return the single key of ``table`` that names a discriminant.

    Raises:
        KeyNotFoundError: No discriminant present (names the expected set).
        MultiKeyError: Several discriminants present (names those found, in input order).
    """
    found: list[str] = [key for key in table if key in registry]
    if not found:
        raise KeyNotFoundError(list(registry))
    if len(found) > 1:
        raise MultiKeyError(found)
    return found[0]


def one_of(table: Any, registry: Mapping[str, Decoder[T]]) -> T:
    """Dispatch ``table`` on its single discriminant key.

    Args:
        table (Any): Node expected to be a table.
        registry (Mapping[str, Decoder[T]]): Discriminant key to sub-decoder.

    Returns:
        T: The value produced by the selected sub-decoder.
    """
    checked: TomlTable = as_table(table)
    key: str = select_key(checked, registry)
    logger.trace("Dispatching on discriminant %r", key)
    return located(key, registry[key], checked[key])


def one_of_type(node: Any, *branches: tuple[NodeShape, Decoder[T]]) -> T:
    """Decode ``node`` with the first branch whose shape matches.

    Raises:
        IncorrectTypeError: No branch matches; names all accepted shapes.
    """
    for shape, decoder in branches:
        if shape.matches(node):
            return decoder(node)
    raise IncorrectTypeError([shape.value for shape, _decoder in branches], shape_name(node))

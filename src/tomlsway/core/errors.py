# topmark:header:start
#
#   project      : tomlsway
#   file         : errors.py
#   file_relpath : src/tomlsway/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode error taxonomy.

Every sub-decoder raises one of the `DecodeError` subclasses below as soon as
it meets a problem; callers never try an alternate decoding. While an error
travels back up through the discriminant combinators, each level prepends the
key it dispatched on (see `DecodeError.at`), so the final message names the
location of the offending node, e.g. ``bindsym.$mod+Return.exec: Key not
found: command``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def _join(items: Sequence[str]) -> str:
    return ", ".join(items)


class DecodeError(Exception):
    """Base class for all structural decode failures.

    Attributes:
        message (str): Human readable description, without location.
        path (tuple[str, ...]): Keys leading from the document root to the node
            that failed to decode. Empty when the location is unknown.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message
        self.path: tuple[str, ...] = ()

    def at(self, *keys: str) -> DecodeError:
        """Prepend ``keys`` to the error location and return ``self``.

        Args:
            *keys (str): Keys of the enclosing tables, outermost first.

        Returns:
            DecodeError: This error, so callers can ``raise exc.at(key)``.
        """
        self.path = (*keys, *self.path)
        return self

    @property
    def location(self) -> str:
        """Dotted location of the failing node (empty string at the root)."""
        return ".".join(self.path)

    def __str__(self) -> str:
        if self.path:
            return f"{self.location}: {self.message}"
        return self.message


class KeyNotFoundError(DecodeError):
    """A required key (or every key of a discriminant set) is absent."""

    def __init__(self, keys: str | Sequence[str]) -> None:
        self.keys: tuple[str, ...] = (keys,) if isinstance(keys, str) else tuple(keys)
        if len(self.keys) == 1:
            message = f"Key not found: {self.keys[0]}"
        else:
            message = f"Key not found: expected one of ({_join(self.keys)})"
        super().__init__(message)


class IncorrectTypeError(DecodeError):
    """A node is present but has the wrong shape."""

    def __init__(self, expected: Sequence[str], found: str | None = None) -> None:
        self.expected: tuple[str, ...] = tuple(expected)
        self.found: str | None = found
        message = f"Incorrect type: Must be one of the following: ({_join(self.expected)})"
        if found is not None:
            message = f"{message}, found {found}"
        super().__init__(message)


class MultiKeyError(DecodeError):
    """More than one discriminant key is present; ambiguity is never resolved."""

    def __init__(self, keys: Sequence[str]) -> None:
        self.keys: tuple[str, ...] = tuple(keys)
        super().__init__(f"One and only one key must be provided: found ({_join(self.keys)})")


class StringMismatchError(DecodeError):
    """A string is present but is not one of the accepted tokens."""

    def __init__(self, expected: Sequence[str], found: str) -> None:
        self.expected: tuple[str, ...] = tuple(expected)
        self.found: str = found
        super().__init__(
            f"String does not match: expected one of ({_join(self.expected)}), found {found}"
        )


class ConflictDiffError(DecodeError):
    """Two fields that must hold different values are equal."""

    def __init__(self, first: str, second: str) -> None:
        self.first: str = first
        self.second: str = second
        super().__init__(f"Conflict: keys {first} and {second} cannot have the same value")


class ConflictKeyError(DecodeError):
    """Two fields that must not co-occur are both present."""

    def __init__(self, first: str, second: str) -> None:
        self.first: str = first
        self.second: str = second
        super().__init__(f"Conflict: keys {first} and {second} cannot both be defined")


class NotImplementedDecodeError(DecodeError):
    """A recognized command shape that has no decoder yet."""

    def __init__(self, what: str) -> None:
        self.what: str = what
        super().__init__(f"Not implemented: {what}")


class NestedBindingError(DecodeError):
    """A key binding whose bound command is itself a key binding."""

    def __init__(self, keyword: str) -> None:
        self.keyword: str = keyword
        super().__init__(f"Nested bindings are not allowed: {keyword} cannot bind {keyword}")


class UnknownKeyError(DecodeError):
    """A key that names no known command or option."""

    def __init__(self, key: str, expected: Sequence[str]) -> None:
        self.key: str = key
        self.expected: tuple[str, ...] = tuple(expected)
        super().__init__(f"Unknown key: {key} (expected one of ({_join(self.expected)}))")


class UnrecognizedTokenError(StringMismatchError):
    """A value-domain token that matches no canonical spelling or alias.

    Raised by the ``decode`` classmethod of the value domains in
    ``tomlsway.model.domains``.
    """

    def __init__(self, domain: str, expected: Sequence[str], found: str) -> None:
        self.domain: str = domain
        super().__init__(expected, found)


class CommandConstructionError(ValueError):
    """A command model instance was built in violation of its invariants.

    Unlike `DecodeError`, this signals a programming error in the caller
    (for example a ``Resize`` built with both axes set), not bad user input.
    """

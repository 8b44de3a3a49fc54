# topmark:header:start
#
#   project      : tomlsway
#   file         : domains.py
#   file_relpath : src/tomlsway/model/domains.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value domains: the closed vocabularies of sway command arguments.

Each domain is a [`ValueDomain`][tomlsway.model.domains.ValueDomain] whose
``.value`` is the canonical token sway expects. Decoding accepts the canonical
token, the member name and any documented alias (case-insensitively, with
``-``/``_``/space treated alike); encoding always yields the canonical token.

Decoding is lossy-in, lossless-out: ``decode("h")`` and ``decode("horizontal")``
both give ``Split.HORIZONTAL``, which only ever encodes as ``"horizontal"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeVar

from tomlsway.core.enum_mixins import KeyedStrEnum
from tomlsway.core.errors import UnrecognizedTokenError

_VD = TypeVar("_VD", bound="ValueDomain")


class ValueDomain(KeyedStrEnum):
    """Base class for all value domains (declares no members)."""

    @classmethod
    def decode(cls: type[_VD], token: str) -> _VD:
        """Decode a user supplied token into a domain member.

        Args:
            token (str): Raw token from the input document.

        Returns:
            _VD: The matching member.

        Raises:
            UnrecognizedTokenError: If ``token`` matches no canonical spelling,
                member name or alias. The error lists the canonical tokens.
        """
        member: _VD | None = cls.parse(token)
        if member is None:
            raise UnrecognizedTokenError(cls.__name__, cls.keys(), token)
        return member

    def encode(self) -> str:
        """Return the canonical compositor token."""
        return str(self.value)


class Directional(ValueDomain):
    UP = ("up", "Up")
    DOWN = ("down", "Down")
    LEFT = ("left", "Left")
    RIGHT = ("right", "Right")


class TogglableBool(ValueDomain):
    """Three-valued toggle layered over conventional booleans."""

    ENABLE = ("enable", "Enable", ("true", "yes"))
    DISABLE = ("disable", "Disable", ("false", "no"))
    TOGGLE = ("toggle", "Toggle")

    @classmethod
    def from_bool(cls, value: bool) -> TogglableBool:
        return cls.ENABLE if value else cls.DISABLE


class Split(ValueDomain):
    HORIZONTAL = ("horizontal", "Horizontal", ("h",))
    VERTICAL = ("vertical", "Vertical", ("v",))
    NONE = ("none", "None")


class Units(ValueDomain):
    PX = ("px", "Pixels")
    PPT = ("ppt", "Percentage points")


class Size(ValueDomain):
    GROW = ("grow", "Grow by")
    SHRINK = ("shrink", "Shrink by")
    SET = ("set", "Set to")


class Hierarchy(ValueDomain):
    PARENT = ("parent", "Parent")
    CHILD = ("child", "Child")


class Sibling(ValueDomain):
    PREV = ("prev", "Previous", ("previous",))
    NEXT = ("next", "Next")


class RelWorkspace(ValueDomain):
    PREV = ("prev", "Previous", ("previous",))
    NEXT = ("next", "Next")
    CURRENT = ("current", "Current")


class Layout(ValueDomain):
    DEFAULT = ("default", "Default")
    STACKING = ("stacking", "Stacking")
    TABBED = ("tabbed", "Tabbed")
    SPLITH = ("splith", "Split horizontally", ("split-h",))
    SPLITV = ("splitv", "Split vertically", ("split-v",))


class LayoutCycleSingle(ValueDomain):
    ALL = ("all", "All layouts")
    SPLIT = ("split", "Split layouts")


class LayoutCycleMulti(ValueDomain):
    STACKING = ("stacking", "Stacking")
    TABBED = ("tabbed", "Tabbed")
    SPLIT = ("split", "Split")
    SPLITH = ("splith", "Split horizontally", ("split-h",))
    SPLITV = ("splitv", "Split vertically", ("split-v",))


class FocusMode(ValueDomain):
    TILING = ("tiling", "Tiling")
    FLOATING = ("floating", "Floating")
    MODE_TOGGLE = ("mode_toggle", "Toggle tiling/floating", ("mode-toggle",))


class BindFlag(ValueDomain):
    """Flags accepted by ``bindsym``/``bindcode``.

    The canonical token carries the leading ``--``; the bare kebab name is
    accepted as an alias (``release`` decodes to ``--release``).
    """

    WHOLE_WINDOW = ("--whole-window", "Whole window", ("whole-window",))
    BORDER = ("--border", "Border", ("border",))
    EXCLUDE_TITLEBAR = ("--exclude-titlebar", "Exclude titlebar", ("exclude-titlebar",))
    RELEASE = ("--release", "Release", ("release",))
    LOCKED = ("--locked", "Locked", ("locked",))
    TO_CODE = ("--to-code", "To code", ("to-code",))
    NO_WARN = ("--no-warn", "No warn", ("no-warn",))
    NO_REPEAT = ("--no-repeat", "No repeat", ("no-repeat",))
    INHIBITED = ("--inhibited", "Inhibited", ("inhibited",))

    @property
    def option_name(self) -> str:
        """The flag spelled as a TOML key (``--to-code`` -> ``to-code``)."""
        return self.value[2:]


class ExecFlag(ValueDomain):
    NO_STARTUP_ID = ("--no-startup-id", "No startup id", ("no-startup-id",))

    @property
    def option_name(self) -> str:
        return self.value[2:]


@dataclass(frozen=True)
class InputDevice:
    """The one parameterised bind flag: ``--input-device=<name>``."""

    name: str

    def encode(self) -> str:
        return f"--input-device={self.name}"

    def __str__(self) -> str:
        return self.encode()


BindFlagLike = BindFlag | InputDevice

DOMAINS: tuple[type[ValueDomain], ...] = (
    Directional,
    TogglableBool,
    Split,
    Units,
    Size,
    Hierarchy,
    Sibling,
    RelWorkspace,
    Layout,
    LayoutCycleSingle,
    LayoutCycleMulti,
    FocusMode,
    BindFlag,
    ExecFlag,
)

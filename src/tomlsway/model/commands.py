# topmark:header:start
#
#   project      : tomlsway
#   file         : commands.py
#   file_relpath : src/tomlsway/model/commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command model: one flat set of immutable sway commands.

Every command is a frozen dataclass deriving from [`Command`][tomlsway.model.commands.Command].
Instead of two parallel type hierarchies, each class carries two capability
markers:

- ``config_scope``: the command may appear in a static configuration file;
- ``runtime_scope``: the command may be issued at runtime (e.g. as the command
  bound to a key).

Commands that are valid in both contexts (``exec``, ``set``, ``bindsym``, ...)
simply set both markers. Family membership is tested with
[`is_config`][tomlsway.model.commands.is_config] and
[`is_runtime`][tomlsway.model.commands.is_runtime].

Constructors enforce the intrinsic invariants (see each class) and raise
[`CommandConstructionError`][tomlsway.core.errors.CommandConstructionError];
``encode()`` trusts an already valid instance and never re-validates.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from tomlsway.core.errors import CommandConstructionError
from tomlsway.model import domains
from tomlsway.model.domains import BindFlagLike, ExecFlag, Size, TogglableBool, Units
from tomlsway.model.targets import FocusTarget, LayoutTarget, MoveTarget


def _flags_prefix(flags: tuple[BindFlagLike, ...] | tuple[ExecFlag, ...]) -> str:
    """Render flags each followed by one space, in declared order."""
    return "".join(f"{flag.encode()} " for flag in flags)


def _require_non_negative(owner: str, field_name: str, value: int) -> None:
    if value < 0:
        raise CommandConstructionError(
            f"{owner}.{field_name} must be a non-negative integer, got {value}"
        )


class Command:
    """Base class of all commands.

    Attributes:
        keyword (ClassVar[str]): The sway command keyword (``""`` for lines
            that are not commands, i.e. comments and blank lines).
        config_scope (ClassVar[bool]): Valid in a configuration file.
        runtime_scope (ClassVar[bool]): Valid as a runtime command.
    """

    __slots__ = ()

    keyword: ClassVar[str] = ""
    config_scope: ClassVar[bool] = False
    runtime_scope: ClassVar[bool] = False

    def encode(self) -> str:
        """Return the canonical configuration text of this command."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.encode()


def is_config(command: Command) -> bool:
    """Return True if ``command`` may appear in a configuration file."""
    return command.config_scope


def is_runtime(command: Command) -> bool:
    """Return True if ``command`` may be issued at runtime."""
    return command.runtime_scope


def is_binding(command: Command) -> bool:
    return isinstance(command, Binding)


# --- config-only ---------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Comment(Command):
    """A single ``#`` comment line. An empty text renders as a bare ``#``."""

    text: str = ""

    config_scope: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if "\n" in self.text:
            raise CommandConstructionError("Comment text must be a single line")

    def encode(self) -> str:
        return f"# {self.text}" if self.text else "#"


@dataclass(frozen=True, slots=True)
class Blank(Command):
    config_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return ""


@dataclass(frozen=True, slots=True)
class Include(Command):
    path: str

    keyword: ClassVar[str] = "include"
    config_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"include {self.path}"


@dataclass(frozen=True, slots=True)
class Bar(Command):
    """A ``bar { ... }`` block; ``id`` may be empty."""

    status_command: str
    id: str = ""

    keyword: ClassVar[str] = "bar"
    config_scope: ClassVar[bool] = True

    def encode(self) -> str:
        head: str = f"bar {self.id} {{" if self.id else "bar {"
        return f"{head}\n    status_command {self.status_command}\n}}"


# --- config and runtime --------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Exec(Command):
    command: str
    flags: tuple[ExecFlag, ...] = ()

    keyword: ClassVar[str] = "exec"
    config_scope: ClassVar[bool] = True
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"{self.keyword} {_flags_prefix(self.flags)}{self.command}"


@dataclass(frozen=True, slots=True)
class ExecAlways(Command):
    """Like ``exec``, but also run on every configuration reload."""

    command: str
    flags: tuple[ExecFlag, ...] = ()

    keyword: ClassVar[str] = "exec_always"
    config_scope: ClassVar[bool] = True
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"{self.keyword} {_flags_prefix(self.flags)}{self.command}"


@dataclass(frozen=True, slots=True)
class Set(Command):
    """Variable assignment; ``name`` is given without the leading ``$``."""

    name: str
    value: str

    keyword: ClassVar[str] = "set"
    config_scope: ClassVar[bool] = True
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"set ${self.name} {self.value}"


@dataclass(frozen=True, slots=True)
class Kill(Command):
    keyword: ClassVar[str] = "kill"
    config_scope: ClassVar[bool] = True
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return "kill"


@dataclass(frozen=True, slots=True)
class Binding(Command):
    """Shared shape of ``bindsym`` and ``bindcode``.

    Invariants:
        - at least one key;
        - the bound command is a runtime command and is not itself a binding.
    """

    keys: tuple[str, ...]
    command: Command
    flags: tuple[BindFlagLike, ...] = ()

    def __post_init__(self) -> None:
        name: str = type(self).__name__
        if not self.keys:
            raise CommandConstructionError(f"{name} requires at least one key")
        if isinstance(self.command, Binding):
            raise CommandConstructionError(
                f"{name} cannot bind another binding ({self.command.keyword})"
            )
        if not is_runtime(self.command):
            raise CommandConstructionError(
                f"{name} can only bind runtime commands, got {type(self.command).__name__}"
            )

    def encode(self) -> str:
        combo: str = "+".join(self.keys)
        return f"{self.keyword} {_flags_prefix(self.flags)}{combo} {self.command.encode()}"


@dataclass(frozen=True, slots=True)
class Bindsym(Binding):
    keyword: ClassVar[str] = "bindsym"
    config_scope: ClassVar[bool] = True
    runtime_scope: ClassVar[bool] = True


@dataclass(frozen=True, slots=True)
class Bindcode(Binding):
    """Binding by key code; config-time only."""

    keyword: ClassVar[str] = "bindcode"
    config_scope: ClassVar[bool] = True


# --- runtime-only --------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Reload(Command):
    keyword: ClassVar[str] = "reload"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return "reload"


@dataclass(frozen=True, slots=True)
class Exit(Command):
    keyword: ClassVar[str] = "exit"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return "exit"


@dataclass(frozen=True, slots=True)
class Floating(Command):
    state: TogglableBool

    keyword: ClassVar[str] = "floating"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"floating {self.state.encode()}"


@dataclass(frozen=True, slots=True)
class Split(Command):
    orientation: domains.Split

    keyword: ClassVar[str] = "split"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"split {self.orientation.encode()}"


@dataclass(frozen=True, slots=True)
class Workspace(Command):
    number: int
    name: str | None = None

    keyword: ClassVar[str] = "workspace"
    runtime_scope: ClassVar[bool] = True

    def __post_init__(self) -> None:
        _require_non_negative("Workspace", "number", self.number)

    def encode(self) -> str:
        if self.name:
            return f"workspace {self.number} {self.name}"
        return f"workspace {self.number}"


@dataclass(frozen=True, slots=True)
class Focus(Command):
    target: FocusTarget

    keyword: ClassVar[str] = "focus"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"focus {self.target.encode()}"


@dataclass(frozen=True, slots=True)
class Layout(Command):
    target: LayoutTarget

    keyword: ClassVar[str] = "layout"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"layout {self.target.encode()}"


@dataclass(frozen=True, slots=True)
class Move(Command):
    target: MoveTarget

    keyword: ClassVar[str] = "move"
    runtime_scope: ClassVar[bool] = True

    def encode(self) -> str:
        return f"move {self.target.encode()}"


@dataclass(frozen=True, slots=True)
class Resize(Command):
    """``resize <grow|shrink> <width|height> <n> <unit>`` or ``resize set ...``.

    ``grow`` and ``shrink`` take exactly one of ``width`` and ``height``;
    ``set`` takes either or both (``resize set width 640 px height 480 px``).
    """

    change: Size
    width: int | None = None
    height: int | None = None
    unit: Units = Units.PPT

    keyword: ClassVar[str] = "resize"
    runtime_scope: ClassVar[bool] = True

    def __post_init__(self) -> None:
        if self.width is None and self.height is None:
            raise CommandConstructionError("Resize requires width or height")
        if self.change is not Size.SET and self.width is not None and self.height is not None:
            raise CommandConstructionError(
                f"Resize {self.change.encode()} requires exactly one of width and height"
            )
        for field_name in ("width", "height"):
            value: int | None = getattr(self, field_name)
            if value is not None:
                _require_non_negative("Resize", field_name, value)

    def encode(self) -> str:
        unit: str = self.unit.encode()
        axes: list[str] = [
            f"{axis} {magnitude} {unit}"
            for axis, magnitude in (("width", self.width), ("height", self.height))
            if magnitude is not None
        ]
        return f"resize {self.change.encode()} {' '.join(axes)}"

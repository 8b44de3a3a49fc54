# topmark:header:start
#
#   project      : tomlsway
#   file         : targets.py
#   file_relpath : src/tomlsway/model/targets.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sub-command shapes of ``focus``, ``layout`` and ``move``.

Each of those commands takes exactly one target. A target is a small frozen
dataclass that knows its canonical text (everything after the command
keyword). Which alternative a command carries is decided by construction (the
class chosen), never by a flag; e.g. ``focus output left`` and ``focus output
HDMI-A-1`` are two distinct classes.
"""

from __future__ import annotations

from dataclasses import dataclass

from tomlsway.core.errors import CommandConstructionError
from tomlsway.model.domains import (
    Directional,
    FocusMode,
    Hierarchy,
    Layout,
    LayoutCycleMulti,
    LayoutCycleSingle,
    RelWorkspace,
    Sibling,
    Units,
)


def _require_non_negative(owner: str, field_name: str, value: int) -> None:
    if value < 0:
        raise CommandConstructionError(
            f"{owner}.{field_name} must be a non-negative integer, got {value}"
        )


class Target:
    """Base class of all sub-command targets."""

    __slots__ = ()

    def encode(self) -> str:
        """Return the canonical text following the command keyword."""
        raise NotImplementedError

    def __str__(self) -> str:
        return self.encode()


# --- focus -------------------------------------------------------------------


class FocusTarget(Target):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class FocusDirectional(FocusTarget):
    direction: Directional

    def encode(self) -> str:
        return self.direction.encode()


@dataclass(frozen=True, slots=True)
class FocusRelative(FocusTarget):
    """``focus prev`` / ``focus next``."""

    sibling: Sibling

    def encode(self) -> str:
        return self.sibling.encode()


@dataclass(frozen=True, slots=True)
class FocusSibling(FocusTarget):
    sibling: Sibling

    def encode(self) -> str:
        return f"{self.sibling.encode()} sibling"


@dataclass(frozen=True, slots=True)
class FocusHierarchy(FocusTarget):
    level: Hierarchy

    def encode(self) -> str:
        return self.level.encode()


@dataclass(frozen=True, slots=True)
class FocusOutputDirectional(FocusTarget):
    direction: Directional

    def encode(self) -> str:
        return f"output {self.direction.encode()}"


@dataclass(frozen=True, slots=True)
class FocusOutputNamed(FocusTarget):
    name: str

    def encode(self) -> str:
        return f"output {self.name}"


@dataclass(frozen=True, slots=True)
class FocusModeTarget(FocusTarget):
    mode: FocusMode

    def encode(self) -> str:
        return self.mode.encode()


# --- layout ------------------------------------------------------------------


class LayoutTarget(Target):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class LayoutSet(LayoutTarget):
    layout: Layout

    def encode(self) -> str:
        return self.layout.encode()


@dataclass(frozen=True, slots=True)
class LayoutCycle(LayoutTarget):
    """``layout toggle all`` / ``layout toggle split``."""

    single: LayoutCycleSingle

    def encode(self) -> str:
        return f"toggle {self.single.encode()}"


@dataclass(frozen=True, slots=True)
class LayoutCycleList(LayoutTarget):
    """``layout toggle <l1> <l2> ...``; cycles through the listed layouts."""

    layouts: tuple[LayoutCycleMulti, ...]

    def __post_init__(self) -> None:
        if not self.layouts:
            raise CommandConstructionError("LayoutCycleList requires at least one layout")

    def encode(self) -> str:
        return "toggle " + " ".join(layout.encode() for layout in self.layouts)


# --- move --------------------------------------------------------------------


class MoveTarget(Target):
    __slots__ = ()


@dataclass(frozen=True, slots=True)
class MoveDirectional(MoveTarget):
    """``move <dir>`` or ``move <dir> <n> px``."""

    direction: Directional
    px: int | None = None

    def __post_init__(self) -> None:
        if self.px is not None:
            _require_non_negative("MoveDirectional", "px", self.px)

    def encode(self) -> str:
        if self.px is None:
            return self.direction.encode()
        return f"{self.direction.encode()} {self.px} px"


@dataclass(frozen=True, slots=True)
class MoveCoordinates(MoveTarget):
    x: int
    y: int
    x_unit: Units = Units.PX
    y_unit: Units = Units.PX
    absolute: bool = False

    def encode(self) -> str:
        prefix: str = "absolute " if self.absolute else ""
        return (
            f"{prefix}position {self.x} {self.x_unit.encode()} {self.y} {self.y_unit.encode()}"
        )


@dataclass(frozen=True, slots=True)
class MoveCenter(MoveTarget):
    absolute: bool = False

    def encode(self) -> str:
        prefix: str = "absolute " if self.absolute else ""
        return f"{prefix}position center"


@dataclass(frozen=True, slots=True)
class MoveToCursor(MoveTarget):
    def encode(self) -> str:
        return "position cursor"


@dataclass(frozen=True, slots=True)
class MoveToWorkspace(MoveTarget):
    rel: RelWorkspace

    def encode(self) -> str:
        return f"container to workspace {self.rel.encode()}"


@dataclass(frozen=True, slots=True)
class MoveToWorkspaceNumber(MoveTarget):
    number: int

    def __post_init__(self) -> None:
        _require_non_negative("MoveToWorkspaceNumber", "number", self.number)

    def encode(self) -> str:
        return f"container to workspace number {self.number}"


@dataclass(frozen=True, slots=True)
class MoveToWorkspaceOnOutput(MoveTarget):
    sibling: Sibling

    def encode(self) -> str:
        return f"container to workspace {self.sibling.encode()}_on_output"


@dataclass(frozen=True, slots=True)
class MoveBackAndForth(MoveTarget):
    def encode(self) -> str:
        return "container to workspace back_and_forth"


@dataclass(frozen=True, slots=True)
class MoveToScratchpad(MoveTarget):
    def encode(self) -> str:
        return "container to scratchpad"


@dataclass(frozen=True, slots=True)
class MoveToOutputDirectional(MoveTarget):
    direction: Directional

    def encode(self) -> str:
        return f"container to output {self.direction.encode()}"


@dataclass(frozen=True, slots=True)
class MoveToOutputNamed(MoveTarget):
    name: str

    def encode(self) -> str:
        return f"container to output {self.name}"


@dataclass(frozen=True, slots=True)
class MoveToMark(MoveTarget):
    mark: str

    def __post_init__(self) -> None:
        if not self.mark:
            raise CommandConstructionError("MoveToMark requires a non-empty mark")

    def encode(self) -> str:
        return f"container to mark {self.mark}"


@dataclass(frozen=True, slots=True)
class MoveWorkspaceToOutputDirectional(MoveTarget):
    """Move the whole focused workspace, not just the container."""

    direction: Directional

    def encode(self) -> str:
        return f"workspace to output {self.direction.encode()}"


@dataclass(frozen=True, slots=True)
class MoveWorkspaceToOutputNamed(MoveTarget):
    name: str

    def encode(self) -> str:
        return f"workspace to output {self.name}"

# topmark:header:start
#
#   project      : tomlsway
#   file         : defaults.py
#   file_relpath : src/tomlsway/defaults.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Default configuration built directly from the command model.

The document mirrors the key bindings of sway's stock configuration and is
constructed without going through the decoder.
"""

from __future__ import annotations

from tomlsway.model import domains
from tomlsway.model.commands import (
    Bar,
    Bindsym,
    Command,
    Exec,
    Exit,
    Floating,
    Focus,
    Kill,
    Layout,
    Move,
    Reload,
    Resize,
    Set,
    Split,
    Workspace,
)
from tomlsway.model.document import ConfigDocument
from tomlsway.model.domains import Directional, FocusMode, Hierarchy, Size, TogglableBool, Units
from tomlsway.model.targets import (
    FocusDirectional,
    FocusHierarchy,
    FocusModeTarget,
    LayoutCycle,
    LayoutSet,
    MoveDirectional,
    MoveToScratchpad,
    MoveToWorkspaceNumber,
)

ARROW_KEYS: dict[Directional, str] = {
    Directional.LEFT: "Left",
    Directional.DOWN: "Down",
    Directional.UP: "Up",
    Directional.RIGHT: "Right",
}

DEFAULT_STATUS_COMMAND: str = "while date +'%Y-%m-%d %X'; do sleep 1; done"


def _bind(*keys: str, command: Command) -> Bindsym:
    return Bindsym(keys=("$mod", *keys), command=command)


def _workspace_bindings() -> list[Bindsym]:
    bindings: list[Bindsym] = []
    for number in range(1, 11):
        key: str = str(number % 10)
        bindings.append(_bind(key, command=Workspace(number)))
        bindings.append(
            _bind("Shift", key, command=Move(MoveToWorkspaceNumber(number))),
        )
    return bindings


RESIZE_STEP_PX: int = 10


def _resize_bindings() -> list[Bindsym]:
    step: int = RESIZE_STEP_PX
    resizes: dict[Directional, Resize] = {
        Directional.LEFT: Resize(Size.SHRINK, width=step, unit=Units.PX),
        Directional.RIGHT: Resize(Size.GROW, width=step, unit=Units.PX),
        Directional.UP: Resize(Size.SHRINK, height=step, unit=Units.PX),
        Directional.DOWN: Resize(Size.GROW, height=step, unit=Units.PX),
    }
    return [
        _bind("Control", ARROW_KEYS[direction], command=resize)
        for direction, resize in resizes.items()
    ]


def default_document(
    mod_key: str = "Mod4",
    terminal: str = "foot",
    launcher: str = "wmenu-run",
) -> ConfigDocument:
    """Build the default configuration document.

    Args:
        mod_key (str): Modifier bound to ``$mod`` (``Mod4`` is the logo key).
        terminal (str): Terminal emulator bound to ``$term``.
        launcher (str): Application launcher bound to ``$menu``.

    Returns:
        ConfigDocument: Variables, key bindings and a status bar.
    """
    bindings: list[Bindsym] = [
        _bind("Return", command=Exec("$term")),
        _bind("d", command=Exec("$menu")),
        _bind("Shift", "q", command=Kill()),
        _bind("Shift", "c", command=Reload()),
        _bind("Shift", "e", command=Exit()),
    ]
    bindings.extend(
        _bind(key, command=Focus(FocusDirectional(direction)))
        for direction, key in ARROW_KEYS.items()
    )
    bindings.extend(
        _bind("Shift", key, command=Move(MoveDirectional(direction)))
        for direction, key in ARROW_KEYS.items()
    )
    bindings.extend(_workspace_bindings())
    bindings.extend(
        [
            _bind("b", command=Split(domains.Split.HORIZONTAL)),
            _bind("v", command=Split(domains.Split.VERTICAL)),
            _bind("s", command=Layout(LayoutSet(domains.Layout.STACKING))),
            _bind("w", command=Layout(LayoutSet(domains.Layout.TABBED))),
            _bind("e", command=Layout(LayoutCycle(domains.LayoutCycleSingle.SPLIT))),
            _bind("Shift", "space", command=Floating(TogglableBool.TOGGLE)),
            _bind("space", command=Focus(FocusModeTarget(FocusMode.MODE_TOGGLE))),
            _bind("a", command=Focus(FocusHierarchy(Hierarchy.PARENT))),
            _bind("Shift", "minus", command=Move(MoveToScratchpad())),
        ]
    )
    bindings.extend(_resize_bindings())

    return ConfigDocument(
        sets=(
            Set("mod", mod_key),
            Set("term", terminal),
            Set("menu", launcher),
        ),
        bindsyms=tuple(bindings),
        bar=Bar(status_command=DEFAULT_STATUS_COMMAND),
    )

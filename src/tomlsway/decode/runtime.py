# topmark:header:start
#
#   project      : tomlsway
#   file         : runtime.py
#   file_relpath : src/tomlsway/decode/runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode runtime commands.

A runtime command is a table with exactly one discriminant key, e.g.::

    move = { directional = "up" }
    resize = { change = "grow", width = 10, px = true }

[`decode_runtime`][tomlsway.decode.runtime.decode_runtime] dispatches on that
key through [`RUNTIME_DECODERS`][tomlsway.decode.runtime.RUNTIME_DECODERS].
The sub-commands of ``focus``, ``layout`` and ``move`` are tables dispatched
the same way.

Binding entries (the values of the ``[bindsym]``/``[bindcode]`` tables) are
decoded by [`decode_binding`][tomlsway.decode.runtime.decode_binding]: one
runtime discriminant plus optional flag keys.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, TypeVar

from tomlsway.config.logging import get_logger
from tomlsway.core.errors import (
    ConflictDiffError,
    ConflictKeyError,
    IncorrectTypeError,
    KeyNotFoundError,
    NestedBindingError,
    StringMismatchError,
)
from tomlsway.decode.base import (
    NodeShape,
    as_array,
    as_bool,
    as_int,
    as_str,
    as_table,
    as_uint,
    as_unit,
    each,
    field,
    field_opt,
    located,
    one_of,
    one_of_type,
    reject_unknown,
    select_key,
)
from tomlsway.model import domains
from tomlsway.model.commands import (
    Binding,
    Bindsym,
    Command,
    Exec,
    ExecAlways,
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
from tomlsway.model.domains import (
    BindFlag,
    BindFlagLike,
    Directional,
    ExecFlag,
    FocusMode,
    Hierarchy,
    InputDevice,
    LayoutCycleMulti,
    LayoutCycleSingle,
    RelWorkspace,
    Sibling,
    Size,
    TogglableBool,
    Units,
)
from tomlsway.model.targets import (
    FocusDirectional,
    FocusHierarchy,
    FocusModeTarget,
    FocusOutputDirectional,
    FocusOutputNamed,
    FocusRelative,
    FocusSibling,
    FocusTarget,
    LayoutCycle,
    LayoutCycleList,
    LayoutSet,
    LayoutTarget,
    MoveBackAndForth,
    MoveCenter,
    MoveCoordinates,
    MoveDirectional,
    MoveTarget,
    MoveToCursor,
    MoveToMark,
    MoveToOutputDirectional,
    MoveToOutputNamed,
    MoveToScratchpad,
    MoveToWorkspace,
    MoveToWorkspaceNumber,
    MoveToWorkspaceOnOutput,
    MoveWorkspaceToOutputDirectional,
    MoveWorkspaceToOutputNamed,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlsway.config.io.types import TomlTable
    from tomlsway.config.logging import TomlswayLogger

logger: TomlswayLogger = get_logger(__name__)

BACK_AND_FORTH: str = "back-and-forth"
FLAGS_KEY: str = "flags"
INPUT_DEVICE_KEY: str = "input-device"

_B = TypeVar("_B", bound=Binding)


# --- scalar commands -------------------------------------------------------------


def _decode_exit(node: Any) -> Exit:
    as_unit(node)
    return Exit()


def _decode_reload(node: Any) -> Reload:
    as_unit(node)
    return Reload()


def _decode_kill(node: Any) -> Kill:
    as_unit(node)
    return Kill()


def decode_togglable(node: Any) -> TogglableBool:
    """Decode ``true``/``false`` or a toggle token (``"toggle"``, ``"yes"``, ...)."""
    return one_of_type(
        node,
        (NodeShape.BOOLEAN, TogglableBool.from_bool),
        (NodeShape.STRING, TogglableBool.decode),
    )


def _decode_floating(node: Any) -> Floating:
    return Floating(decode_togglable(node))


def _decode_split(node: Any) -> Split:
    return Split(domains.Split.decode(as_str(node)))


def _decode_workspace(node: Any) -> Workspace:
    def from_table(table: TomlTable) -> Workspace:
        return Workspace(
            number=field(table, "number", as_uint),
            name=field_opt(table, "name", as_str, None),
        )

    return one_of_type(
        node,
        (NodeShape.INTEGER, lambda n: Workspace(as_uint(n))),
        (NodeShape.TABLE, from_table),
    )


def _decode_set(node: Any) -> Set:
    table: TomlTable = as_table(node)
    return Set(name=field(table, "name", as_str), value=field(table, "value", as_str))


def decode_exec_args(node: Any) -> tuple[str, tuple[ExecFlag, ...]]:
    """Decode the shared shape of ``exec``/``exec-always``.

    Accepts a command string, or a table ``{command, no-startup-id?}``.

    Returns:
        tuple[str, tuple[ExecFlag, ...]]: The command and its flags.
    """

    def from_table(table: TomlTable) -> tuple[str, tuple[ExecFlag, ...]]:
        command: str = field(table, "command", as_str)
        flags: list[ExecFlag] = [
            flag for flag in ExecFlag if field_opt(table, flag.option_name, as_bool, False)
        ]
        return command, tuple(flags)

    return one_of_type(
        node,
        (NodeShape.STRING, lambda s: (s, ())),
        (NodeShape.TABLE, from_table),
    )


def _decode_exec(node: Any) -> Exec:
    command, flags = decode_exec_args(node)
    return Exec(command, flags)


def _decode_exec_always(node: Any) -> ExecAlways:
    command, flags = decode_exec_args(node)
    return ExecAlways(command, flags)


# --- focus -----------------------------------------------------------------------


def _decode_named_or_directional_output(
    node: Any,
    directional: Callable[[Directional], Any],
    named: Callable[[str], Any],
) -> Any:
    """Decode an ``output`` target: a name, or a table ``{directional}``/``{named}``."""
    return one_of_type(
        node,
        (NodeShape.STRING, named),
        (
            NodeShape.TABLE,
            lambda table: one_of(
                table,
                {
                    "directional": lambda n: directional(Directional.decode(as_str(n))),
                    "named": lambda n: named(as_str(n)),
                },
            ),
        ),
    )


FOCUS_DECODERS: Mapping[str, Callable[[Any], FocusTarget]] = {
    "directional": lambda n: FocusDirectional(Directional.decode(as_str(n))),
    "relative": lambda n: FocusRelative(Sibling.decode(as_str(n))),
    "sibling": lambda n: FocusSibling(Sibling.decode(as_str(n))),
    "hierarchy": lambda n: FocusHierarchy(Hierarchy.decode(as_str(n))),
    "output": lambda n: _decode_named_or_directional_output(
        n, FocusOutputDirectional, FocusOutputNamed
    ),
    "mode": lambda n: FocusModeTarget(FocusMode.decode(as_str(n))),
}


def _decode_focus(node: Any) -> Focus:
    return Focus(one_of(node, FOCUS_DECODERS))


# --- layout ----------------------------------------------------------------------


def _decode_cycle_list(node: Any) -> LayoutCycleList:
    items: list[Any] = as_array(node)
    if not items:
        raise IncorrectTypeError(["non-empty array"], "empty array")
    layouts: list[LayoutCycleMulti] = each(items, lambda n: LayoutCycleMulti.decode(as_str(n)))
    return LayoutCycleList(tuple(layouts))


LAYOUT_DECODERS: Mapping[str, Callable[[Any], LayoutTarget]] = {
    "set": lambda n: LayoutSet(domains.Layout.decode(as_str(n))),
    "cycle": lambda n: one_of_type(
        n,
        (NodeShape.STRING, lambda s: LayoutCycle(LayoutCycleSingle.decode(s))),
        (NodeShape.ARRAY, _decode_cycle_list),
    ),
}


def _decode_layout(node: Any) -> Layout:
    return Layout(one_of(node, LAYOUT_DECODERS))


# --- move ------------------------------------------------------------------------


def _decode_move_directional(node: Any) -> MoveDirectional:
    def from_table(table: TomlTable) -> MoveDirectional:
        return MoveDirectional(
            direction=field(table, "direction", lambda n: Directional.decode(as_str(n))),
            px=field_opt(table, "px", as_uint, None),
        )

    return one_of_type(
        node,
        (NodeShape.STRING, lambda s: MoveDirectional(Directional.decode(s))),
        (NodeShape.TABLE, from_table),
    )


def _decode_units(node: Any) -> Units:
    return Units.decode(as_str(node))


def _decode_move_coordinates(node: Any) -> MoveCoordinates:
    table: TomlTable = as_table(node)
    return MoveCoordinates(
        x=field(table, "x", as_int),
        y=field(table, "y", as_int),
        x_unit=field_opt(table, "x-unit", _decode_units, Units.PX),
        y_unit=field_opt(table, "y-unit", _decode_units, Units.PX),
        absolute=field_opt(table, "absolute", as_bool, False),
    )


def _decode_move_center(node: Any) -> MoveCenter:
    return one_of_type(
        node,
        (NodeShape.BOOLEAN, lambda absolute: MoveCenter(absolute=absolute)),
        (
            NodeShape.TABLE,
            lambda table: MoveCenter(absolute=field_opt(table, "absolute", as_bool, False)),
        ),
    )


def _decode_cursor(node: Any) -> MoveToCursor:
    as_unit(node)
    return MoveToCursor()


def _decode_scratchpad(node: Any) -> MoveToScratchpad:
    as_unit(node)
    return MoveToScratchpad()


def _decode_back_and_forth(node: Any) -> MoveBackAndForth:
    as_unit(node)
    return MoveBackAndForth()


def _decode_mark(node: Any) -> MoveToMark:
    mark: str = as_str(node)
    if not mark:
        raise IncorrectTypeError(["non-empty string"], "empty string")
    return MoveToMark(mark)


def _decode_workspace_token(token: str) -> MoveTarget:
    rel: RelWorkspace | None = RelWorkspace.parse(token)
    if rel is not None:
        return MoveToWorkspace(rel)
    if token.strip().lower().replace("_", "-") == BACK_AND_FORTH:
        return MoveBackAndForth()
    raise StringMismatchError([*RelWorkspace.keys(), BACK_AND_FORTH], token)


def _decode_move_workspace(node: Any) -> MoveTarget:
    return one_of_type(
        node,
        (NodeShape.STRING, _decode_workspace_token),
        (NodeShape.INTEGER, lambda n: MoveToWorkspaceNumber(as_uint(n))),
        (
            NodeShape.TABLE,
            lambda table: one_of(
                table,
                {
                    "output": lambda n: MoveToWorkspaceOnOutput(Sibling.decode(as_str(n))),
                    BACK_AND_FORTH: _decode_back_and_forth,
                },
            ),
        ),
    )


MOVE_DECODERS: Mapping[str, Callable[[Any], MoveTarget]] = {
    "directional": _decode_move_directional,
    "coordinates": _decode_move_coordinates,
    "center": _decode_move_center,
    "cursor": _decode_cursor,
    "mouse": _decode_cursor,
    "pointer": _decode_cursor,
    "workspace": _decode_move_workspace,
    "scratchpad": _decode_scratchpad,
    "output": lambda n: _decode_named_or_directional_output(
        n, MoveToOutputDirectional, MoveToOutputNamed
    ),
    "mark": _decode_mark,
    "workspace-to-output": lambda n: _decode_named_or_directional_output(
        n, MoveWorkspaceToOutputDirectional, MoveWorkspaceToOutputNamed
    ),
}


def _decode_move(node: Any) -> Move:
    return Move(one_of(node, MOVE_DECODERS))


# --- resize ----------------------------------------------------------------------


def _decode_axis(table: TomlTable, name: str, alias: str) -> int | None:
    """Decode one resize axis, spelled ``name`` or ``alias`` but not both."""
    if name in table and alias in table:
        raise ConflictKeyError(name, alias)
    key: str = name if name in table else alias
    return field_opt(table, key, as_uint, None)


def _decode_resize_units(table: TomlTable) -> Units:
    """Resolve the unit from the ``px``/``ppt`` boolean pair.

    A single flag implies the opposite value for the other one; with neither
    given the unit is ``ppt``. Both given with the same value is a conflict.
    """
    px: bool | None = field_opt(table, "px", as_bool, None)
    ppt: bool | None = field_opt(table, "ppt", as_bool, None)
    if px is not None and ppt is not None and px == ppt:
        raise ConflictDiffError("px", "ppt")
    if px is not None:
        return Units.PX if px else Units.PPT
    if ppt is not None:
        return Units.PPT if ppt else Units.PX
    return Units.PPT


def _decode_resize(node: Any) -> Resize:
    table: TomlTable = as_table(node)
    change: Size = field(table, "change", lambda n: Size.decode(as_str(n)))
    width: int | None = _decode_axis(table, "width", "x")
    height: int | None = _decode_axis(table, "height", "y")
    if change is not Size.SET and width is not None and height is not None:
        raise ConflictKeyError("width", "height")
    if width is None and height is None:
        raise KeyNotFoundError(["width", "height"])
    return Resize(change=change, width=width, height=height, unit=_decode_resize_units(table))


# --- bindings --------------------------------------------------------------------


def split_keys(combo: str) -> tuple[str, ...]:
    """Split a key combination (``"$mod+Shift+q"``) into its keys."""
    keys: tuple[str, ...] = tuple(key.strip() for key in combo.split("+"))
    if not all(keys):
        raise IncorrectTypeError(["key combination"], repr(combo))
    return keys


def _decode_flag_item(node: Any) -> BindFlagLike:
    return one_of_type(
        node,
        (NodeShape.STRING, BindFlag.decode),
        (
            NodeShape.TABLE,
            lambda table: InputDevice(field(table, INPUT_DEVICE_KEY, as_str)),
        ),
    )


def decode_bind_flags(table: TomlTable) -> tuple[BindFlagLike, ...]:
    """Collect the flags of a binding table.

    Flags come from three places, in this order: the ``flags`` array, the
    boolean flag keys (``release = true``) in domain order, and the
    ``input-device`` string. Duplicates keep their first position.
    """
    flags: list[BindFlagLike] = []
    flags.extend(field_opt(table, FLAGS_KEY, lambda n: each(n, _decode_flag_item), []))
    for flag in BindFlag:
        if field_opt(table, flag.option_name, as_bool, False):
            flags.append(flag)
    device: str | None = field_opt(table, INPUT_DEVICE_KEY, as_str, None)
    if device is not None:
        flags.append(InputDevice(device))
    return tuple(dict.fromkeys(flags))


FLAG_KEYS: tuple[str, ...] = (
    FLAGS_KEY,
    INPUT_DEVICE_KEY,
    *(flag.option_name for flag in BindFlag),
)


RUNTIME_BINDSYM_KEYS: tuple[str, ...] = ("keys", "command", *FLAG_KEYS)


def _decode_runtime_bindsym(node: Any) -> Bindsym:
    """Runtime form: ``bindsym = { keys = "...", command = { ... }, flags = [...] }``."""
    table: TomlTable = as_table(node)
    reject_unknown(table, RUNTIME_BINDSYM_KEYS)
    keys: tuple[str, ...] = field(table, "keys", lambda n: split_keys(as_str(n)))
    command: Command = field(table, "command", lambda n: decode_runtime(n, in_binding=True))
    flags: tuple[BindFlagLike, ...] = decode_bind_flags(table)
    return Bindsym(keys=keys, command=command, flags=flags)


# --- dispatch --------------------------------------------------------------------


RUNTIME_DECODERS: Mapping[str, Callable[[Any], Command]] = {
    "exit": _decode_exit,
    "floating": _decode_floating,
    "focus": _decode_focus,
    "layout": _decode_layout,
    "move": _decode_move,
    "reload": _decode_reload,
    "resize": _decode_resize,
    "split": _decode_split,
    "kill": _decode_kill,
    "workspace": _decode_workspace,
    "set": _decode_set,
    "exec": _decode_exec,
    "exec-always": _decode_exec_always,
    "bindsym": _decode_runtime_bindsym,
}

BINDING_KEYS: frozenset[str] = frozenset({"bindsym"})


def decode_runtime(node: Any, *, in_binding: bool = False) -> Command:
    """Decode a runtime command table.

    Args:
        node (Any): Table holding exactly one runtime discriminant key.
        in_binding (bool): True when decoding the command bound by a binding;
            a nested binding is then rejected.

    Returns:
        Command: The decoded runtime command.

    Raises:
        KeyNotFoundError: No runtime discriminant present.
        MultiKeyError: More than one runtime discriminant present.
        NestedBindingError: ``in_binding`` is True and the command is a binding.
        DecodeError: Any error raised by the sub-decoder, located at its key.
    """
    table: TomlTable = as_table(node)
    key: str = select_key(table, RUNTIME_DECODERS)
    if in_binding and key in BINDING_KEYS:
        raise NestedBindingError(key).at(key)
    command: Command = located(key, RUNTIME_DECODERS[key], table[key])
    logger.trace("Decoded runtime command %r", command)
    return command


def decode_binding(combo: str, node: Any, binding_cls: type[_B]) -> _B:
    """Decode one entry of a ``[bindsym]`` or ``[bindcode]`` table.

    Args:
        combo (str): The entry key, a ``+``-joined key combination.
        node (Any): The entry value: one runtime discriminant plus flag keys.
        binding_cls (type[_B]): ``Bindsym`` or ``Bindcode``.

    Returns:
        _B: The decoded binding.

    Raises:
        UnknownKeyError: The entry holds a key that is neither a runtime
            discriminant nor a flag key.
    """
    table: TomlTable = as_table(node)
    reject_unknown(table, (*RUNTIME_DECODERS, *FLAG_KEYS))
    command_table: TomlTable = {k: v for k, v in table.items() if k in RUNTIME_DECODERS}
    command: Command = decode_runtime(command_table, in_binding=True)
    binding: _B = binding_cls(
        keys=split_keys(combo),
        command=command,
        flags=decode_bind_flags(table),
    )
    logger.trace("Decoded %s %s", binding.keyword, combo)
    return binding

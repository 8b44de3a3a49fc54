# topmark:header:start
#
#   project      : tomlsway
#   file         : test_runtime.py
#   file_relpath : tests/decode/test_runtime.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Runtime command decoding: dispatch rules, per-command shapes and error locations."""

from __future__ import annotations

from typing import Any

import pytest

from tests.conftest import parametrize
from tomlsway.core.errors import (
    ConflictDiffError,
    ConflictKeyError,
    DecodeError,
    IncorrectTypeError,
    KeyNotFoundError,
    MultiKeyError,
    NestedBindingError,
    StringMismatchError,
    UnknownKeyError,
    UnrecognizedTokenError,
)
from tomlsway.decode import decode_binding, decode_runtime
from tomlsway.decode.runtime import RUNTIME_DECODERS, split_keys
from tomlsway.model import domains
from tomlsway.model.commands import (
    Bindcode,
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
    LayoutCycle,
    LayoutCycleList,
    LayoutSet,
    MoveBackAndForth,
    MoveCenter,
    MoveCoordinates,
    MoveDirectional,
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

# --- end-to-end scenarios ----------------------------------------------------------


def test_exec_table_decodes_and_renders() -> None:
    command: Command = decode_runtime({"exec": {"command": "/bin/bash"}})
    assert command == Exec("/bin/bash")
    assert command.encode() == "exec /bin/bash"


def test_bindsym_entry_decodes_and_renders() -> None:
    binding: Bindsym = decode_binding("Mod4+X", {"move": {"directional": "up"}}, Bindsym)
    assert binding == Bindsym(
        keys=("Mod4", "X"),
        command=Move(MoveDirectional(Directional.UP, None)),
        flags=(),
    )
    assert binding.encode() == "bindsym Mod4+X move up"


def test_workspace_with_and_without_name() -> None:
    named: Command = decode_runtime({"workspace": {"number": 7, "name": "pickle rick"}})
    assert named.encode() == "workspace 7 pickle rick"
    plain: Command = decode_runtime({"workspace": 3})
    assert plain.encode() == "workspace 3"


# --- discriminant rule -------------------------------------------------------------


def test_no_discriminant_names_expected_set() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({})
    assert excinfo.value.keys == tuple(RUNTIME_DECODERS)
    assert str(excinfo.value).startswith("Key not found: expected one of (exit, floating, ")


def test_unrelated_keys_are_not_discriminants() -> None:
    with pytest.raises(KeyNotFoundError):
        decode_runtime({"nonsense": True})


def test_two_discriminants_is_multi_key_error_in_input_order() -> None:
    with pytest.raises(MultiKeyError) as excinfo:
        decode_runtime({"reload": True, "exit": True})
    assert excinfo.value.keys == ("reload", "exit")
    assert str(excinfo.value) == "One and only one key must be provided: found (reload, exit)"


def test_sub_command_multi_key_is_located() -> None:
    with pytest.raises(MultiKeyError) as excinfo:
        decode_runtime({"focus": {"directional": "up", "hierarchy": "parent"}})
    assert excinfo.value.path == ("focus",)


def test_non_table_command_is_incorrect_type() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime("exit")
    assert excinfo.value.expected == ("table",)
    assert excinfo.value.found == "string"


# --- scalar commands ---------------------------------------------------------------


@parametrize("key, expected", [("exit", Exit()), ("reload", Reload()), ("kill", Kill())])
@parametrize("value", [True, False, {}])
def test_argument_less_commands_accept_bool_or_empty_table(
    key: str, expected: Command, value: Any
) -> None:
    assert decode_runtime({key: value}) == expected


def test_argument_less_command_rejects_non_empty_table() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"exit": {"now": True}})
    assert excinfo.value.expected == ("empty table",)
    assert excinfo.value.location == "exit"


def test_argument_less_command_rejects_string() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"kill": "yes"})
    assert excinfo.value.expected == ("boolean", "table")


@parametrize(
    "value, state",
    [
        (True, TogglableBool.ENABLE),
        (False, TogglableBool.DISABLE),
        ("toggle", TogglableBool.TOGGLE),
        ("yes", TogglableBool.ENABLE),
        ("Disable", TogglableBool.DISABLE),
    ],
)
def test_floating(value: Any, state: TogglableBool) -> None:
    assert decode_runtime({"floating": value}) == Floating(state)


def test_floating_rejects_integer() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"floating": 1})
    assert str(excinfo.value) == (
        "floating: Incorrect type: Must be one of the following: (boolean, string), found integer"
    )


@parametrize("token", ["h", "horizontal", "HORIZONTAL"])
def test_split(token: str) -> None:
    assert decode_runtime({"split": token}) == Split(domains.Split.HORIZONTAL)


def test_workspace_rejects_boolean_as_integer() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"workspace": True})
    assert excinfo.value.found == "boolean"


def test_workspace_rejects_negative_number() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"workspace": {"number": -2}})
    assert excinfo.value.expected == ("non-negative integer",)
    assert excinfo.value.location == "workspace.number"


def test_workspace_table_requires_number() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({"workspace": {"name": "web"}})
    assert str(excinfo.value) == "workspace: Key not found: number"


def test_set_command() -> None:
    assert decode_runtime({"set": {"name": "mod", "value": "Mod1"}}) == Set("mod", "Mod1")


def test_exec_string_and_flags() -> None:
    assert decode_runtime({"exec": "foot"}) == Exec("foot")
    assert decode_runtime({"exec-always": {"command": "kanshi", "no-startup-id": True}}) == (
        ExecAlways("kanshi", (ExecFlag.NO_STARTUP_ID,))
    )


def test_exec_table_requires_command() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({"exec": {"no-startup-id": True}})
    assert str(excinfo.value) == "exec: Key not found: command"


# --- focus -------------------------------------------------------------------------


@parametrize(
    "table, target",
    [
        ({"directional": "left"}, FocusDirectional(Directional.LEFT)),
        ({"relative": "next"}, FocusRelative(Sibling.NEXT)),
        ({"relative": "previous"}, FocusRelative(Sibling.PREV)),
        ({"sibling": "previous"}, FocusSibling(Sibling.PREV)),
        ({"hierarchy": "child"}, FocusHierarchy(Hierarchy.CHILD)),
        ({"output": "HDMI-A-1"}, FocusOutputNamed("HDMI-A-1")),
        ({"output": {"named": "eDP-1"}}, FocusOutputNamed("eDP-1")),
        ({"output": {"directional": "right"}}, FocusOutputDirectional(Directional.RIGHT)),
        ({"mode": "mode-toggle"}, FocusModeTarget(FocusMode.MODE_TOGGLE)),
    ],
)
def test_focus_targets(table: dict[str, Any], target: Any) -> None:
    assert decode_runtime({"focus": table}) == Focus(target)


# --- layout ------------------------------------------------------------------------


def test_layout_set_and_cycle() -> None:
    assert decode_runtime({"layout": {"set": "split-v"}}) == Layout(
        LayoutSet(domains.Layout.SPLITV)
    )
    assert decode_runtime({"layout": {"cycle": "all"}}) == Layout(
        LayoutCycle(LayoutCycleSingle.ALL)
    )
    assert decode_runtime({"layout": {"cycle": ["stacking", "split-h"]}}) == Layout(
        LayoutCycleList((LayoutCycleMulti.STACKING, LayoutCycleMulti.SPLITH))
    )


def test_layout_cycle_rejects_empty_array() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"layout": {"cycle": []}})
    assert excinfo.value.location == "layout.cycle"


def test_layout_cycle_error_is_located_by_index() -> None:
    with pytest.raises(UnrecognizedTokenError) as excinfo:
        decode_runtime({"layout": {"cycle": ["stacking", "diagonal"]}})
    assert excinfo.value.path == ("layout", "cycle", "1")


# --- move --------------------------------------------------------------------------


@parametrize(
    "table, target",
    [
        ({"directional": "up"}, MoveDirectional(Directional.UP)),
        ({"directional": {"direction": "down", "px": 30}}, MoveDirectional(Directional.DOWN, 30)),
        ({"coordinates": {"x": 10, "y": 20}}, MoveCoordinates(10, 20)),
        (
            {"coordinates": {"x": 1, "y": 2, "x-unit": "ppt", "absolute": True}},
            MoveCoordinates(1, 2, Units.PPT, Units.PX, absolute=True),
        ),
        ({"center": True}, MoveCenter(absolute=True)),
        ({"center": False}, MoveCenter(absolute=False)),
        ({"center": {}}, MoveCenter(absolute=False)),
        ({"center": {"absolute": True}}, MoveCenter(absolute=True)),
        ({"cursor": True}, MoveToCursor()),
        ({"mouse": True}, MoveToCursor()),
        ({"pointer": {}}, MoveToCursor()),
        ({"mark": "scratch"}, MoveToMark("scratch")),
        ({"workspace-to-output": "HDMI-A-1"}, MoveWorkspaceToOutputNamed("HDMI-A-1")),
        (
            {"workspace-to-output": {"directional": "up"}},
            MoveWorkspaceToOutputDirectional(Directional.UP),
        ),
        ({"workspace": "next"}, MoveToWorkspace(RelWorkspace.NEXT)),
        ({"workspace": "previous"}, MoveToWorkspace(RelWorkspace.PREV)),
        ({"workspace": "back-and-forth"}, MoveBackAndForth()),
        ({"workspace": 4}, MoveToWorkspaceNumber(4)),
        ({"workspace": {"output": "prev"}}, MoveToWorkspaceOnOutput(Sibling.PREV)),
        ({"workspace": {"back-and-forth": True}}, MoveBackAndForth()),
        ({"scratchpad": {}}, MoveToScratchpad()),
        ({"output": "DP-2"}, MoveToOutputNamed("DP-2")),
        ({"output": {"directional": "left"}}, MoveToOutputDirectional(Directional.LEFT)),
    ],
)
def test_move_targets(table: dict[str, Any], target: Any) -> None:
    assert decode_runtime({"move": table}) == Move(target)


def test_move_cursor_aliases_are_one_discriminant_each() -> None:
    with pytest.raises(MultiKeyError) as excinfo:
        decode_runtime({"move": {"cursor": True, "mouse": True}})
    assert excinfo.value.keys == ("cursor", "mouse")


def test_move_mark_rejects_empty_name() -> None:
    with pytest.raises(IncorrectTypeError) as excinfo:
        decode_runtime({"move": {"mark": ""}})
    assert excinfo.value.location == "move.mark"


def test_move_workspace_rejects_unknown_token() -> None:
    with pytest.raises(StringMismatchError) as excinfo:
        decode_runtime({"move": {"workspace": "elsewhere"}})
    assert excinfo.value.expected == ("prev", "next", "current", "back-and-forth")
    assert excinfo.value.location == "move.workspace"


def test_move_error_names_full_location() -> None:
    with pytest.raises(UnrecognizedTokenError) as excinfo:
        decode_runtime({"move": {"directional": {"direction": "sideways"}}})
    assert str(excinfo.value) == (
        "move.directional.direction: String does not match: "
        "expected one of (up, down, left, right), found sideways"
    )


def test_move_coordinates_require_both_axes() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({"move": {"coordinates": {"x": 10}}})
    assert excinfo.value.keys == ("y",)
    assert excinfo.value.location == "move.coordinates"


# --- resize ------------------------------------------------------------------------


@parametrize(
    "table, expected",
    [
        ({"change": "grow", "width": 10, "px": True}, Resize(Size.GROW, width=10, unit=Units.PX)),
        ({"change": "shrink", "height": 5}, Resize(Size.SHRINK, height=5, unit=Units.PPT)),
        ({"change": "grow", "x": 3}, Resize(Size.GROW, width=3)),
        ({"change": "grow", "y": 4}, Resize(Size.GROW, height=4)),
        ({"change": "grow", "width": 1, "px": False}, Resize(Size.GROW, width=1, unit=Units.PPT)),
        ({"change": "grow", "width": 1, "ppt": False}, Resize(Size.GROW, width=1, unit=Units.PX)),
        (
            {"change": "grow", "width": 1, "px": True, "ppt": False},
            Resize(Size.GROW, width=1, unit=Units.PX),
        ),
    ],
)
def test_resize(table: dict[str, Any], expected: Resize) -> None:
    assert decode_runtime({"resize": table}) == expected


@parametrize(
    "table, text",
    [
        ({"change": "set", "width": 640, "px": True}, "resize set width 640 px"),
        ({"change": "set", "y": 30}, "resize set height 30 ppt"),
        (
            {"change": "set", "x": 800, "y": 600, "px": True},
            "resize set width 800 px height 600 px",
        ),
    ],
)
def test_resize_set(table: dict[str, Any], text: str) -> None:
    command: Command = decode_runtime({"resize": table})
    assert isinstance(command, Resize)
    assert command.change is Size.SET
    assert command.encode() == text


def test_resize_y_alias_sets_height_not_width() -> None:
    command: Command = decode_runtime({"resize": {"change": "grow", "y": 4}})
    assert command.encode() == "resize grow height 4 ppt"


def test_resize_both_axes_conflict() -> None:
    with pytest.raises(ConflictKeyError) as excinfo:
        decode_runtime({"resize": {"change": "grow", "width": 1, "height": 1}})
    assert str(excinfo.value) == "resize: Conflict: keys width and height cannot both be defined"


def test_resize_axis_and_alias_conflict() -> None:
    with pytest.raises(ConflictKeyError) as excinfo:
        decode_runtime({"resize": {"change": "grow", "width": 1, "x": 1}})
    assert (excinfo.value.first, excinfo.value.second) == ("width", "x")


def test_resize_requires_an_axis() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({"resize": {"change": "grow"}})
    assert excinfo.value.keys == ("width", "height")


@parametrize("value", [True, False])
def test_resize_equal_units_conflict(value: bool) -> None:
    with pytest.raises(ConflictDiffError) as excinfo:
        decode_runtime({"resize": {"change": "grow", "width": 1, "px": value, "ppt": value}})
    assert str(excinfo.value) == "resize: Conflict: keys px and ppt cannot have the same value"


def test_resize_requires_change() -> None:
    with pytest.raises(KeyNotFoundError) as excinfo:
        decode_runtime({"resize": {"width": 1}})
    assert str(excinfo.value) == "resize: Key not found: change"


# --- bindings ----------------------------------------------------------------------


def test_runtime_bindsym() -> None:
    command: Command = decode_runtime(
        {"bindsym": {"keys": "$mod+d", "command": {"exec": "wmenu-run"}, "flags": ["release"]}}
    )
    assert command == Bindsym(
        keys=("$mod", "d"), command=Exec("wmenu-run"), flags=(BindFlag.RELEASE,)
    )
    assert command.encode() == "bindsym --release $mod+d exec wmenu-run"


def test_runtime_bindsym_cannot_bind_bindsym() -> None:
    inner = {"keys": "b", "command": {"kill": True}}
    with pytest.raises(NestedBindingError) as excinfo:
        decode_runtime({"bindsym": {"keys": "a", "command": {"bindsym": inner}}})
    assert excinfo.value.path == ("bindsym", "command", "bindsym")


def test_runtime_bindsym_rejects_unknown_keys() -> None:
    with pytest.raises(UnknownKeyError) as excinfo:
        decode_runtime(
            {"bindsym": {"keys": "$mod+d", "command": {"kill": True}, "flag": ["release"]}}
        )
    assert excinfo.value.key == "flag"
    assert excinfo.value.path == ("bindsym",)


def test_binding_entry_cannot_bind_bindsym() -> None:
    entry = {"bindsym": {"keys": "b", "command": {"kill": True}}}
    with pytest.raises(NestedBindingError) as excinfo:
        decode_binding("a", entry, Bindsym)
    assert str(excinfo.value) == (
        "bindsym: Nested bindings are not allowed: bindsym cannot bind bindsym"
    )


def test_binding_flags_collected_in_order_without_duplicates() -> None:
    entry = {
        "exec": "swaylock",
        "flags": ["locked", {"input-device": "kbd"}],
        "release": True,
        "locked": True,
        "no-repeat": False,
    }
    binding: Bindcode = decode_binding("133+38", entry, Bindcode)
    assert binding.flags == (BindFlag.LOCKED, InputDevice("kbd"), BindFlag.RELEASE)
    assert binding.encode() == (
        "bindcode --locked --input-device=kbd --release 133+38 exec swaylock"
    )


def test_binding_input_device_key() -> None:
    entry = {"exec": "pamixer -t", "input-device": "kbd"}
    binding: Bindsym = decode_binding("XF86AudioMute", entry, Bindsym)
    assert binding.flags == (InputDevice("kbd"),)


def test_binding_rejects_unknown_flag_key() -> None:
    with pytest.raises(UnknownKeyError) as excinfo:
        decode_binding("$mod+q", {"kill": True, "relase": True}, Bindsym)
    assert excinfo.value.key == "relase"


def test_binding_flag_array_error_is_located_by_index() -> None:
    with pytest.raises(UnrecognizedTokenError) as excinfo:
        decode_binding("$mod+q", {"kill": True, "flags": ["release", "sticky"]}, Bindsym)
    assert excinfo.value.path == ("flags", "1")


def test_binding_requires_a_command() -> None:
    with pytest.raises(KeyNotFoundError):
        decode_binding("$mod+q", {"release": True}, Bindsym)


@parametrize("combo", ["", "$mod+", "+q", "$mod++q"])
def test_split_keys_rejects_empty_parts(combo: str) -> None:
    with pytest.raises(IncorrectTypeError):
        split_keys(combo)


def test_split_keys_strips_whitespace() -> None:
    assert split_keys("$mod + Shift + q") == ("$mod", "Shift", "q")


def test_all_decode_errors_share_base() -> None:
    with pytest.raises(DecodeError):
        decode_runtime({"split": "diagonal"})

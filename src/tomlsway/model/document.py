# topmark:header:start
#
#   project      : tomlsway
#   file         : document.py
#   file_relpath : src/tomlsway/model/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Whole-file model grouping commands by top-level section."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tomlsway.model.commands import Bar, Bindcode, Bindsym, Exec, ExecAlways, Include, Set

if TYPE_CHECKING:
    from collections.abc import Iterator

    from tomlsway.model.commands import Command


@dataclass(frozen=True)
class ConfigDocument:
    """A decoded configuration document.

    Attributes:
        sets (tuple[Set, ...]): Variables from the ``[set]`` table.
        includes (tuple[Include, ...]): Included files.
        execs (tuple[Exec, ...]): Commands run once at startup.
        exec_always (tuple[ExecAlways, ...]): Commands run at startup and on every reload.
        bindsyms (tuple[Bindsym, ...]): Key bindings by key symbol.
        bindcodes (tuple[Bindcode, ...]): Key bindings by key code.
        bar (Bar | None): The swaybar block, if configured.
    """

    sets: tuple[Set, ...] = ()
    includes: tuple[Include, ...] = ()
    execs: tuple[Exec, ...] = ()
    exec_always: tuple[ExecAlways, ...] = ()
    bindsyms: tuple[Bindsym, ...] = ()
    bindcodes: tuple[Bindcode, ...] = ()
    bar: Bar | None = None

    def sections(self) -> Iterator[tuple[str, tuple[Command, ...]]]:
        """Yield ``(section key, commands)`` pairs in rendering order.

        Section keys are the top-level TOML keys the commands came from.
        """
        yield "set", self.sets
        yield "include", self.includes
        yield "exec", self.execs
        yield "exec-always", self.exec_always
        yield "bindsym", self.bindsyms
        yield "bindcode", self.bindcodes
        bars: tuple[Command, ...] = (self.bar,) if self.bar is not None else ()
        yield "bar", bars

    def commands(self) -> Iterator[Command]:
        """Yield every command of the document, section by section."""
        for _key, commands in self.sections():
            yield from commands

    def is_empty(self) -> bool:
        return not any(commands for _key, commands in self.sections())

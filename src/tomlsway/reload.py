# topmark:header:start
#
#   project      : tomlsway
#   file         : reload.py
#   file_relpath : src/tomlsway/reload.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ask the running compositor to reload its configuration.

Invoked by the CLI only after a configuration file has been written
successfully. The process runner is injectable so tests never spawn
``swaymsg``.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING, Any, Callable

from tomlsway.config.logging import get_logger
from tomlsway.constants import RELOAD_COMMAND

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tomlsway.config.logging import TomlswayLogger

logger: TomlswayLogger = get_logger(__name__)

Runner = Callable[..., "subprocess.CompletedProcess[Any]"]

RELOAD_TIMEOUT_SECONDS: float = 10.0


class ReloadError(RuntimeError):
    """The reload command could not be run or exited with a non-zero status."""

    def __init__(self, command: Sequence[str], detail: str) -> None:
        super().__init__(f"{' '.join(command)}: {detail}")
        self.command: tuple[str, ...] = tuple(command)
        self.detail: str = detail


def reload_compositor(
    command: Sequence[str] = RELOAD_COMMAND,
    runner: Runner = subprocess.run,
) -> None:
    """Run the compositor reload command.

    Args:
        command (Sequence[str]): Program and arguments (``swaymsg reload``).
        runner (Runner): ``subprocess.run`` compatible callable.

    Raises:
        ReloadError: If the program is missing, times out or exits non-zero.
    """
    logger.info("Reloading compositor: %s", " ".join(command))
    try:
        result = runner(
            list(command),
            capture_output=True,
            text=True,
            timeout=RELOAD_TIMEOUT_SECONDS,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ReloadError(command, f"command not found ({exc.filename or command[0]})") from exc
    except subprocess.TimeoutExpired as exc:
        raise ReloadError(command, f"timed out after {exc.timeout} seconds") from exc

    if result.returncode != 0:
        stderr: str = (result.stderr or "").strip()
        detail: str = f"exited with status {result.returncode}"
        if stderr:
            detail = f"{detail}: {stderr}"
        raise ReloadError(command, detail)
    logger.debug("Reload succeeded")

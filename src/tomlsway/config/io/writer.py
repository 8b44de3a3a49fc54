# topmark:header:start
#
#   project      : tomlsway
#   file         : writer.py
#   file_relpath : src/tomlsway/config/io/writer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Atomic text writes for generated configuration files."""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path

from tomlsway.config.logging import TomlswayLogger, get_logger

logger: TomlswayLogger = get_logger(__name__)

DEFAULT_FILE_MODE: int = 0o666


def _current_umask() -> int:
    mask: int = os.umask(0)
    os.umask(mask)
    return mask


def target_mode(path: Path) -> int:
    """Return the permission bits the written file should carry.

    An existing file keeps its mode; a new one gets the mode ``open()`` would
    give it under the current umask.
    """
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return DEFAULT_FILE_MODE & ~_current_umask()


def write_text_atomic(path: Path, text: str) -> int:
    """Write ``text`` to ``path`` through a temporary sibling file.

    The temporary file is created in the destination directory and moved into
    place with ``os.replace``, so readers never observe a half-written config.
    The permission bits follow [`target_mode`][tomlsway.config.io.writer.target_mode].

    Args:
        path (Path): Destination file.
        text (str): Full file contents.

    Returns:
        int: Number of UTF-8 bytes written.

    Raises:
        OSError: If the directory is not writable or the replace fails.
    """
    directory: Path = path.parent if str(path.parent) else Path(".")
    mode: int = target_mode(path)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}-", suffix=".tmp", dir=directory)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except OSError:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    bytes_written: int = len(text.encode("utf-8"))
    logger.debug("Wrote %d bytes to %s", bytes_written, path)
    return bytes_written

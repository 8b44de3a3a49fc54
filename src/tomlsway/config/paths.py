# topmark:header:start
#
#   project      : tomlsway
#   file         : paths.py
#   file_relpath : src/tomlsway/config/paths.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers for locating the TOML document and the generated file.

These utilities centralize the path rules used by the CLI. They do **no I/O**
and take the environment as an explicit mapping so callers (and tests) can
inject it; the translator core never reads the environment itself.

Key behaviors:
    - ``config_home(env)``: ``$XDG_CONFIG_HOME`` when set and non-empty,
      otherwise ``~/.config``.
    - ``default_input_path(env)``: ``<config home>/sway/config.toml``.
    - ``default_output_path(input_path)``: the input path with its ``.toml``
      suffix removed (``config.toml`` -> ``config``).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from tomlsway.config.logging import get_logger
from tomlsway.constants import (
    DEFAULT_INPUT_NAME,
    SWAY_CONFIG_DIRNAME,
    TOML_SUFFIX,
    XDG_CONFIG_HOME_ENV_VAR,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from tomlsway.config.logging import TomlswayLogger

logger: TomlswayLogger = get_logger(__name__)


def config_home(env: Mapping[str, str] | None = None) -> Path:
    """Return the XDG configuration home directory.

    Args:
        env (Mapping[str, str] | None): Environment to consult; defaults to ``os.environ``.

    Returns:
        Path: ``$XDG_CONFIG_HOME`` if set to a non-empty value, else ``~/.config``.
    """
    environ: Mapping[str, str] = os.environ if env is None else env
    raw: str = environ.get(XDG_CONFIG_HOME_ENV_VAR, "").strip()
    if raw:
        return Path(raw).expanduser()
    return Path.home() / ".config"


def default_input_path(env: Mapping[str, str] | None = None) -> Path:
    """Return the default location of the TOML document."""
    path: Path = config_home(env) / SWAY_CONFIG_DIRNAME / DEFAULT_INPUT_NAME
    logger.debug("Default input path: %s", path)
    return path


def default_output_path(input_path: Path) -> Path:
    """Derive the generated config path from the TOML document path.

    A path without a ``.toml`` suffix gets ``.conf`` appended instead, so the
    output never overwrites its own input.
    """
    if input_path.suffix == TOML_SUFFIX:
        return input_path.with_suffix("")
    return input_path.with_name(f"{input_path.name}.conf")


def strip_toml_suffix(raw: str) -> str:
    """Return ``raw`` without a trailing ``.toml`` extension."""
    if raw.endswith(TOML_SUFFIX):
        return raw[: -len(TOML_SUFFIX)]
    return raw

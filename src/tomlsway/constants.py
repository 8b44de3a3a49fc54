# topmark:header:start
#
#   project      : tomlsway
#   file         : constants.py
#   file_relpath : src/tomlsway/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    TOMLSWAY_VERSION: str = get_version("tomlsway")
except PackageNotFoundError:
    TOMLSWAY_VERSION = "0.0.0+unknown"

# Environment variables consulted by the CLI layer:
LOG_LEVEL_ENV_VAR: str = "TOMLSWAY_LOG_LEVEL"
XDG_CONFIG_HOME_ENV_VAR: str = "XDG_CONFIG_HOME"

# Location of the TOML document relative to the XDG config home:
SWAY_CONFIG_DIRNAME: str = "sway"
DEFAULT_INPUT_NAME: str = "config.toml"
TOML_SUFFIX: str = ".toml"

# Marker for writing to standard output instead of a file:
STDOUT_MARKER: str = "-"

RELOAD_COMMAND: tuple[str, ...] = ("swaymsg", "reload")

DEFAULT_BANNER: tuple[str, ...] = (
    "This configuration file was generated by tomlsway from a TOML document.",
    "Some sway features may not be supported yet.",
    "",
    "Changes made directly to this file are lost when it is regenerated;",
    "edit the TOML document and run `tomlsway convert` instead.",
)

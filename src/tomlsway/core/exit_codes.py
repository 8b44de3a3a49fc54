# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/tomlsway/core/exit_codes.py
#   project      : tomlsway
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Defines standardized exit codes used by the tomlsway CLI application.

The values follow BSD ``sysexits`` where a matching code exists, so shell
scripts (and the compositor's own ``exec`` lines) can tell a broken TOML
document apart from a missing file or a failed reload.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for tomlsway CLI.

    Attributes:
        SUCCESS (int): The command completed without errors.
        FAILURE (int): Generic failure.
        WOULD_CHANGE (int): ``convert --check`` found that the output file is
            out of date; nothing was written.
        USAGE_ERROR (int): Invalid command-line usage.
        DECODE_ERROR (int): The TOML document is well formed but does not
            describe valid sway commands.
        FILE_NOT_FOUND (int): The input document does not exist.
        RELOAD_ERROR (int): The compositor reload command failed.
        IO_ERROR (int): Reading or writing a file failed.
        CONFIG_ERROR (int): The input is not valid TOML.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2
    USAGE_ERROR = 64
    DECODE_ERROR = 65
    FILE_NOT_FOUND = 66
    RELOAD_ERROR = 70
    IO_ERROR = 74
    CONFIG_ERROR = 78

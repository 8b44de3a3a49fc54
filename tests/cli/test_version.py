# topmark:header:start
#
#   project      : tomlsway
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

from tests.cli.conftest import assert_SUCCESS, run_cli
from tomlsway.constants import TOMLSWAY_VERSION


def test_version_outputs_installed_version() -> None:
    """It should output the project version exactly."""
    result = run_cli(
        [
            "--no-color",  # Disable color mode for exact matching
            "version",
        ]
    )

    assert_SUCCESS(result)
    assert result.stdout.strip() == TOMLSWAY_VERSION

# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway package.

tomlsway translates a structured TOML document into the line-oriented command
language of the sway compositor configuration file. The core (value domains,
command model, decoder and renderer) is pure; the CLI wraps it with file I/O
and an optional compositor reload.
"""

from __future__ import annotations

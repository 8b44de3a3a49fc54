# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/decode/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decode parsed TOML trees into the command model.

Decoding is a pure function of its input: it performs no I/O, never consults
the environment and stops at the first error, which is raised as a
[`DecodeError`][tomlsway.core.errors.DecodeError] subclass.
"""

from __future__ import annotations

from tomlsway.decode.config import decode, decode_document
from tomlsway.decode.runtime import decode_binding, decode_runtime

__all__ = [
    "decode",
    "decode_binding",
    "decode_document",
    "decode_runtime",
]

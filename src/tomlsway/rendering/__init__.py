# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the command model as sway configuration text."""

from __future__ import annotations

from tomlsway.rendering.render import document_commands, render, render_document

__all__ = [
    "document_commands",
    "render",
    "render_document",
]

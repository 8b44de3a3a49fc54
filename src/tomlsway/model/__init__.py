# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable model of sway configuration commands.

Submodules:
    domains: closed vocabularies of command arguments.
    targets: sub-command shapes of ``focus``, ``layout`` and ``move``.
    commands: the flat command set with config/runtime capability markers.
    document: whole-file grouping of commands by section.
"""

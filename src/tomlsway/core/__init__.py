# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core utilities shared by every layer.

Submodules:
    enum_mixins: keyed string enums with labels and aliases.
    errors: decode error taxonomy and model construction errors.
    exit_codes: CLI exit codes.
"""

# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Ambient configuration for tomlsway.

Submodules:
    logging: TRACE-aware logger class and colored formatter.
    paths: default input and output locations.
    io: TOML loading and atomic writes.
"""

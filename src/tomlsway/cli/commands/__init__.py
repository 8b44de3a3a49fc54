# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""tomlsway CLI subcommands."""

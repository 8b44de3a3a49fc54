# topmark:header:start
#
#   project      : tomlsway
#   file         : __init__.py
#   file_relpath : src/tomlsway/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for tomlsway.

The CLI is a thin I/O shell around the pure translator core: it resolves
paths from the environment, reads and writes files, maps core exceptions to
exit codes and optionally reloads the compositor.
"""

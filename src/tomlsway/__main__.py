# topmark:header:start
#
#   project      : tomlsway
#   file         : __main__.py
#   file_relpath : src/tomlsway/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m tomlsway``."""

from tomlsway.cli.main import cli

if __name__ == "__main__":
    cli()

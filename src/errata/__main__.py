# topmark:header:start
#
#   project      : Errata
#   file         : __main__.py
#   file_relpath : src/errata/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Allow ``python -m errata``."""

from errata.cli.main import cli

if __name__ == "__main__":
    cli()

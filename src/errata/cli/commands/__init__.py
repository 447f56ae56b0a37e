# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata CLI subcommands."""

# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata command-line interface.

The Click group lives in [`errata.cli.main`][errata.cli.main]; this package
imports nothing eagerly.
"""

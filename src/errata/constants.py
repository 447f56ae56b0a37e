# topmark:header:start
#
#   project      : Errata
#   file         : constants.py
#   file_relpath : src/errata/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    ERRATA_VERSION: str = get_version("errata")
except PackageNotFoundError:  # running from a source checkout without installation
    ERRATA_VERSION = "0.0.0"

# Box-drawing glyphs used by the context renderer.
GLYPH_FILE_HEADER: Final[str] = "╭──"
GLYPH_OPEN: Final[str] = "╷"
GLYPH_BAR: Final[str] = "│"
GLYPH_CLOSE: Final[str] = "╵"
GLYPH_UNDERLINE_BAR: Final[str] = "·"
GLYPH_UNDERLINE: Final[str] = "─"
GLYPH_LOCATION_ARROW: Final[str] = "-->"

SUMMARY_NO_MESSAGES: Final[str] = "no messages!"
SUMMARY_PREFIX: Final[str] = "encountered: "

# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendering primitives shared by all diagnostic renderers.

This package holds the colorization backend. It knows nothing
about diagnostics themselves, so it can be reused by any human-facing emitter.
"""

from __future__ import annotations

from errata.rendering.color import ColorMode, Role, colorize, resolve_color_mode
from errata.rendering.colored_enum import ColoredStrEnum, Colorizer

__all__ = [
    "ColorMode",
    "ColoredStrEnum",
    "Colorizer",
    "Role",
    "colorize",
    "resolve_color_mode",
]

# topmark:header:start
#
#   project      : Errata
#   file         : color.py
#   file_relpath : src/errata/rendering/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colorization backend for rendered diagnostics.

This module is the single place where rendered text gets styled. Renderers compute
all alignment on plain text first and only then wrap whole glyph runs with
[`colorize`][errata.rendering.color.colorize], so enabling color never shifts a
column.

Contents:
    - `Role`: structural color roles (gutter glyphs, line numbers, accents, success).
    - `colorize()`: apply a severity or role colorizer, or return the text unchanged.
    - `ColorMode` and `resolve_color_mode()`: user intent for colored output and
      its resolution against CLI flags, environment and TTY status.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from errata.config.logging import get_logger
from errata.rendering.colored_enum import ColoredStrEnum, palette

if TYPE_CHECKING:
    from errata.config.logging import ErrataLogger
    from errata.rendering.colored_enum import Colorizer


logger: ErrataLogger = get_logger(__name__)


class Role(ColoredStrEnum):
    """Color roles for the structural parts of a rendered diagnostic."""

    GUTTER = ("gutter", palette.blue)
    LINENO = ("lineno", palette.gray)
    ACCENT = ("accent", palette.blue)
    SUCCESS = ("success", palette.green)


class HasColor(Protocol):
    """Anything carrying a colorizer, e.g. a `Severity` or a `Role` member."""

    @property
    def color(self) -> Colorizer:
        """Return the colorizer for this role."""
        ...


def colorize(text: str, role: HasColor, *, enabled: bool) -> str:
    """Style ``text`` for ``role`` when color output is enabled.

    Args:
        text: Plain text to style.
        role: A `Severity` or `Role` member.
        enabled: Whether ANSI styling should be applied at all.

    Returns:
        The styled text, or ``text`` unchanged when ``enabled`` is False or ``text`` is empty.
    """
    if not enabled or not text:
        return text
    return role.color(text)


class ColorMode(str, Enum):
    """User intent for colorized terminal output.

    Attributes:
        AUTO: Enable color only when appropriate (typically when stdout is a TTY).
        ALWAYS: Force-enable color regardless of TTY status.
        NEVER: Disable color entirely.

    Example:
        >>> resolve_color_mode(color_mode_override=ColorMode.NEVER)
        False
    """

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Decision precedence:
        1. **Override**: `ALWAYS` → True; `NEVER` → False.
        2. **Environment**:
            - `FORCE_COLOR` (set and not equal to `"0"`) → True
            - `NO_COLOR` (set to any value) → False
        3. **Auto**: `stdout.isatty()`.

    Args:
        color_mode_override: Parsed `ColorMode` value; `None` means “not provided”.
        stdout_isatty: Optional override for TTY detection. When `None`, the function
            calls `sys.stdout.isatty()` and falls back to `False` on error.

    Returns:
        True if ANSI color should be enabled; False otherwise.
    """
    if color_mode_override == ColorMode.ALWAYS:
        return True
    if color_mode_override == ColorMode.NEVER:
        return False

    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        logger.debug("Color forced on by FORCE_COLOR=%r", force_color)
        return True
    if os.getenv("NO_COLOR") is not None:
        logger.debug("Color disabled by NO_COLOR")
        return False

    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (OSError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)

# topmark:header:start
#
#   project      : Errata
#   file         : severity.py
#   file_relpath : src/errata/diagnostic/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic severity levels."""

from __future__ import annotations

from errata.rendering.color import colorize
from errata.rendering.colored_enum import ColoredStrEnum, palette


class Severity(ColoredStrEnum):
    """Severity of a diagnostic or of a single highlight.

    Severities map to terminal colors (error red, warning yellow, info blue) and
    count toward the summary of a `DiagnosticSet`, reported in declaration order.
    """

    ERROR = ("error", palette.red)
    WARNING = ("warning", palette.yellow)
    INFO = ("info", palette.blue)

    @property
    def label(self) -> str:
        """Return the display label, e.g. ``"error"``."""
        return self.value

    @property
    def plural_label(self) -> str:
        """Return the label used for counts in the summary line, e.g. ``"errors"``."""
        return f"{self.value}s"

    def colorize(self, text: str, *, enabled: bool = True) -> str:
        """Style ``text`` with this severity's color (identity when disabled)."""
        return colorize(text, self, enabled=enabled)

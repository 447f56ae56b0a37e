# topmark:header:start
#
#   project      : Errata
#   file         : highlight.py
#   file_relpath : src/errata/diagnostic/highlight.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Underline annotations inside a source context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from errata.diagnostic.severity import Severity

HighlightLike = Union["Highlight", tuple[int, int, int], tuple[int, int]]


@dataclass(frozen=True, slots=True)
class Highlight:
    """A single underline under one line of a `Context`.

    Highlights are not validated. A `column + length` past the end of the line
    renders extra underline characters; a `line_offset` matching no primary line
    of the owning context is never rendered.

    Attributes:
        line_offset: 0-based index into the owning context's primary lines.
        column: Number of characters before the underline starts.
        length: Number of underline characters.
        note: Optional text printed after the underline.
        severity: Color of the underline and note; defaults to error.
    """

    line_offset: int
    column: int
    length: int
    note: str | None = None
    severity: Severity = Severity.ERROR

    def with_note(self, note: str) -> Highlight:
        """Return a copy that prints ``note`` after the underline."""
        return replace(self, note=note)

    def as_warning(self) -> Highlight:
        """Return a copy rendered with warning severity."""
        return replace(self, severity=Severity.WARNING)

    def as_info(self) -> Highlight:
        """Return a copy rendered with info severity."""
        return replace(self, severity=Severity.INFO)

    @classmethod
    def coerce(cls, value: HighlightLike) -> Highlight:
        """Build a highlight from a `Highlight` or a tuple shorthand.

        ``(line_offset, column, length)`` maps field by field; ``(column, length)``
        targets the first line of the context.

        Args:
            value: A highlight or one of the tuple shorthands.

        Returns:
            The corresponding `Highlight`.

        Raises:
            TypeError: If ``value`` is neither a highlight nor a 2- or 3-tuple.
        """
        if isinstance(value, Highlight):
            return value
        if isinstance(value, tuple):
            if len(value) == 3:
                return cls(value[0], value[1], value[2])
            if len(value) == 2:
                return cls(0, value[0], value[1])
        raise TypeError(f"Cannot build a Highlight from {value!r}")

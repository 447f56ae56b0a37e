# topmark:header:start
#
#   project      : Errata
#   file         : context.py
#   file_relpath : src/errata/diagnostic/context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source contexts: excerpts of source lines with a gutter and underlines.

A `Context` renders as one block:

```text
  ╭──[numbers.txt:5:8]
  │
4 │ help 3
5 │ let x = 1
  ·         ─ expected a number
6 │ help 9
  ╵
```

Layout rules:
    - The gutter is right-aligned to the widest line label in the block, so every
      gutter cell (numbered or blank) has the same width.
    - With a known `linenumber`, labels are real line numbers; the `before` lines
      count backward from it and the `after` lines continue after the last primary
      line.
    - Without a `linenumber`, primary lines are numbered from ``0``, `before` lines
      count down to ``-1`` and `after` lines count up from ``+1``.
    - Highlights attach to primary lines only; each matching highlight adds one
      underline row right below its line, in attachment order.
    - Alignment is computed on plain text; color is applied afterwards to whole
      glyph runs.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING

from errata.config.logging import get_logger
from errata.config.model import DEFAULT_RENDER_CONFIG
from errata.constants import (
    GLYPH_BAR,
    GLYPH_CLOSE,
    GLYPH_FILE_HEADER,
    GLYPH_OPEN,
    GLYPH_UNDERLINE,
    GLYPH_UNDERLINE_BAR,
)
from errata.diagnostic.highlight import Highlight
from errata.rendering.color import Role, colorize

if TYPE_CHECKING:
    from collections.abc import Iterable

    from errata.config.logging import ErrataLogger
    from errata.config.model import RenderConfig
    from errata.diagnostic.highlight import HighlightLike


logger: ErrataLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Context:
    """An excerpt of source lines attached to a diagnostic.

    Build contexts with the `line` / `from_lines` constructors and the ``with_*``
    methods; every builder returns a new value.

    Attributes:
        lines: Primary source lines; highlights refer to these by index.
        linenumber: Line number of the first primary line, if known.
        highlights: Underline annotations, in attachment order.
        file: Name of the file the lines come from, shown in the block header.
        context_before: Extra lines shown right above the primary lines.
        context_after: Extra lines shown right below the primary lines.
    """

    lines: tuple[str, ...] = ()
    linenumber: int | None = None
    highlights: tuple[Highlight, ...] = ()
    file: str | None = None
    context_before: tuple[str, ...] | None = None
    context_after: tuple[str, ...] | None = None

    @classmethod
    def line(cls, line: str) -> Context:
        """Create a context holding a single line."""
        return cls(lines=(line,))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Context:
        """Create a context holding several consecutive lines."""
        return cls(lines=tuple(lines))

    def with_linenumber(self, linenumber: int) -> Context:
        """Return a copy whose first primary line is numbered ``linenumber``."""
        return replace(self, linenumber=linenumber)

    def with_highlight(self, highlight: HighlightLike) -> Context:
        """Return a copy with one more highlight (a `Highlight` or tuple shorthand)."""
        return replace(self, highlights=(*self.highlights, Highlight.coerce(highlight)))

    def with_highlights(self, highlights: Iterable[HighlightLike]) -> Context:
        """Return a copy with all ``highlights`` appended in order."""
        added = tuple(Highlight.coerce(h) for h in highlights)
        return replace(self, highlights=(*self.highlights, *added))

    def with_file(self, file: str) -> Context:
        """Return a copy that names ``file`` in the block header.

        When a linenumber and exactly one highlight are known, the header also shows
        the line and column of that highlight, e.g. ``[src/main.txt:12:4]``.
        """
        return replace(self, file=file)

    def with_before(self, lines: Iterable[str]) -> Context:
        """Return a copy showing ``lines`` right above the primary lines."""
        return replace(self, context_before=tuple(lines))

    def with_after(self, lines: Iterable[str]) -> Context:
        """Return a copy showing ``lines`` right below the primary lines."""
        return replace(self, context_after=tuple(lines))

    # --- rendering ---

    def line_labels(self) -> tuple[list[str], list[str], list[str]]:
        """Return the gutter labels for the before, primary and after lines.

        Labels are signed: a before block longer than the anchor line number yields
        zero or negative labels rather than wrapping around.
        """
        before: tuple[str, ...] = self.context_before or ()
        after: tuple[str, ...] = self.context_after or ()
        n_before: int = len(before)
        n_lines: int = len(self.lines)

        if self.linenumber is not None:
            first: int = self.linenumber
            return (
                [str(first - n_before + i) for i in range(n_before)],
                [str(first + i) for i in range(n_lines)],
                [str(first + n_lines + i) for i in range(len(after))],
            )
        return (
            [str(i - n_before) for i in range(n_before)],
            [str(i) for i in range(n_lines)],
            [f"+{i + 1}" for i in range(len(after))],
        )

    def gutter_width(self) -> int:
        """Return the width of the gutter column (at least 1)."""
        before, primary, after = self.line_labels()
        return max((len(label) for label in (*before, *primary, *after)), default=1)

    def header_location(self) -> str | None:
        """Return the text between the header brackets, or None without a file.

        The column is only shown when a linenumber and exactly one highlight are
        known; with several highlights there is no single column to point at.
        """
        if self.file is None:
            return None
        if self.linenumber is not None and len(self.highlights) == 1:
            highlight: Highlight = self.highlights[0]
            return f"{self.file}:{self.linenumber + highlight.line_offset}:{highlight.column}"
        return self.file

    def render_lines(self, config: RenderConfig | None = None) -> list[str]:
        """Render the block as a list of display lines (without line terminators).

        Args:
            config: Render options; plain text when omitted.

        Returns:
            Header (or opening connector), body rows with underline rows, and the
            closing connector.
        """
        color: bool = (config or DEFAULT_RENDER_CONFIG).color
        before_labels, primary_labels, after_labels = self.line_labels()
        width: int = self.gutter_width()
        blank: str = " " * width
        bar: str = colorize(GLYPH_BAR, Role.GUTTER, enabled=color)

        def source_row(label: str, text: str) -> str:
            gutter: str = colorize(label.rjust(width), Role.LINENO, enabled=color)
            return f"{gutter} {bar} {text}" if text else f"{gutter} {bar}"

        rows: list[str] = []

        location: str | None = self.header_location()
        if location is not None:
            header: str = colorize(GLYPH_FILE_HEADER, Role.GUTTER, enabled=color)
            rows.append(f"{blank} {header}[{location}]")
            rows.append(f"{blank} {bar}")
        else:
            rows.append(f"{blank} {colorize(GLYPH_OPEN, Role.GUTTER, enabled=color)}")

        for label, text in zip(before_labels, self.context_before or ()):
            rows.append(source_row(label, text))

        underline_bar: str = colorize(GLYPH_UNDERLINE_BAR, Role.GUTTER, enabled=color)
        rendered: int = 0
        for index, (label, text) in enumerate(zip(primary_labels, self.lines)):
            rows.append(source_row(label, text))
            for highlight in self.highlights:
                if highlight.line_offset != index:
                    continue
                marker: str = GLYPH_UNDERLINE * highlight.length
                if highlight.note:
                    marker = f"{marker} {highlight.note}"
                styled: str = highlight.severity.colorize(marker, enabled=color)
                rows.append(f"{blank} {underline_bar} {' ' * highlight.column}{styled}")
                rendered += 1

        for label, text in zip(after_labels, self.context_after or ()):
            rows.append(source_row(label, text))

        rows.append(f"{blank} {colorize(GLYPH_CLOSE, Role.GUTTER, enabled=color)}")

        if rendered < len(self.highlights):
            logger.trace(
                "Context: %d of %d highlight(s) did not match a primary line",
                len(self.highlights) - rendered,
                len(self.highlights),
            )
        return rows

    def render(self, config: RenderConfig | None = None) -> str:
        """Render the block as a single newline-joined string."""
        return "\n".join(self.render_lines(config))

    def __str__(self) -> str:
        return self.render()

# topmark:header:start
#
#   project      : Errata
#   file         : numbers.py
#   file_relpath : src/errata/samples/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A small line-oriented format that reports problems as diagnostics.

Format:
    - Blank lines and lines starting with ``#`` are ignored.
    - Every other line must read ``help <number>``, where ``<number>`` is a
      non-negative integer.

Every problem becomes a diagnostic with a one-line context (plus its neighbours),
a 1-based line number and a highlight under the offending token. All problems of a
file are collected before failing, so a single run reports them all.
"""

from __future__ import annotations

import re
from enum import Enum, auto
from typing import TYPE_CHECKING

from errata.config.logging import get_logger
from errata.diagnostic.collection import DiagnosticSet
from errata.diagnostic.context import Context
from errata.diagnostic.errors import DiagnosticSetError
from errata.diagnostic.highlight import Highlight
from errata.diagnostic.model import Diagnostic

if TYPE_CHECKING:
    from errata.config.logging import ErrataLogger

logger: ErrataLogger = get_logger(__name__)

KEYWORD: str = "help"

_TOKEN_RE: re.Pattern[str] = re.compile(r"\S+")


class NumberFileError(Enum):
    """Problems reported by `parse_numbers`."""

    NOT_A_NUMBER = auto()
    MISSING_HELP = auto()
    INCORRECT_NUMBER_OF_ARGUMENTS = auto()
    INVALID_LINE = auto()


def _context(lines: list[str | None], index: int, file: str | None) -> Context:
    """Return a context for ``lines[index]`` with its direct neighbours around it."""
    context = Context.line(lines[index] or "").with_linenumber(index + 1)
    if index > 0 and lines[index - 1] is not None:
        context = context.with_before([lines[index - 1] or ""])
    if index + 1 < len(lines) and lines[index + 1] is not None:
        context = context.with_after([lines[index + 1] or ""])
    if file is not None:
        context = context.with_file(file)
    return context


def _decode_lines(raw: bytes) -> list[str | None]:
    """Split ``raw`` into UTF-8 lines; undecodable lines become None."""
    decoded: list[str | None] = []
    for chunk in raw.splitlines():
        try:
            decoded.append(chunk.decode("utf-8"))
        except UnicodeDecodeError:
            decoded.append(None)
    return decoded


def collect_number_diagnostics(
    content: bytes | str,
    *,
    file: str | None = None,
) -> tuple[list[int], DiagnosticSet[NumberFileError]]:
    """Parse ``content`` and return the numbers together with every problem found.

    Args:
        content: File content; ``str`` input is treated as UTF-8.
        file: Name shown in the context headers.

    Returns:
        The numbers of all lines whose value parsed, and the collected diagnostics.
    """
    raw: bytes = content.encode("utf-8") if isinstance(content, str) else content
    lines: list[str | None] = _decode_lines(raw)
    numbers: list[int] = []
    report: DiagnosticSet[NumberFileError] = DiagnosticSet()

    for index, line in enumerate(lines):
        if line is None:
            report += (
                Diagnostic.here(NumberFileError.INVALID_LINE, "Invalid line")
                .with_message(f"Line {index + 1} is not valid UTF-8")
                .with_help("Re-encode the file as UTF-8")
            )
            continue
        stripped: str = line.strip()
        if not stripped or stripped.startswith("#"):
            continue

        tokens: list[re.Match[str]] = list(_TOKEN_RE.finditer(line))
        if len(tokens) != 2:
            start: int = tokens[0].start()
            report += Diagnostic.here(
                NumberFileError.INCORRECT_NUMBER_OF_ARGUMENTS, "Incorrect number of arguments"
            ).with_context(
                _context(lines, index, file).with_highlight(
                    Highlight(0, start, tokens[-1].end() - start).with_note(
                        f"expected 2 fields, found {len(tokens)}"
                    )
                )
            )
            continue

        keyword, value = tokens
        if keyword.group() != KEYWORD:
            report += (
                Diagnostic.here(NumberFileError.MISSING_HELP, "Missing help")
                .with_message(f"A line should always start with '{KEYWORD}'")
                .with_context(
                    _context(lines, index, file).with_highlight(
                        Highlight(0, keyword.start(), len(keyword.group())).with_note(
                            f"expected '{KEYWORD}'"
                        )
                    )
                )
            )

        text: str = value.group()
        if text.isascii() and text.isdigit():
            numbers.append(int(text))
        else:
            report += (
                Diagnostic.here(NumberFileError.NOT_A_NUMBER, "Not a valid number")
                .with_message(f"After the '{KEYWORD}' a number should be written")
                .with_help(f"{text!r} is not a non-negative integer")
                .with_context(
                    _context(lines, index, file).with_highlight(
                        Highlight(0, value.start(), len(text)).with_note("not a number")
                    )
                )
            )

    logger.debug(
        "Parsed %d line(s): %d number(s), %d diagnostic(s)",
        len(lines),
        len(numbers),
        len(report),
    )
    return numbers, report


def parse_numbers(content: bytes | str, *, file: str | None = None) -> list[int]:
    """Parse ``content`` and return its numbers.

    Args:
        content: File content; ``str`` input is treated as UTF-8.
        file: Name shown in the context headers.

    Returns:
        The numbers, in file order.

    Raises:
        DiagnosticSetError: If any line is malformed; carries every problem found.
    """
    numbers, report = collect_number_diagnostics(content, file=file)
    if not report.is_empty():
        raise DiagnosticSetError(report)
    return numbers

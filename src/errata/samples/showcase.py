# topmark:header:start
#
#   project      : Errata
#   file         : showcase.py
#   file_relpath : src/errata/samples/showcase.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""A gallery of diagnostics exercising every rendering feature.

Used by ``errata demo``; also handy as a reference for building diagnostics.
"""

from __future__ import annotations

from enum import Enum, auto

from errata.diagnostic.collection import DiagnosticSet
from errata.diagnostic.context import Context
from errata.diagnostic.highlight import Highlight
from errata.diagnostic.model import Diagnostic


class ErrorType(Enum):
    """Kinds used by the showcase report."""

    PARSE_ERROR = auto()
    INTEGER_OVERFLOW = auto()
    DIVIDE_BY_ZERO = auto()
    STYLE = auto()


class StyleLint(Enum):
    """A second taxonomy, folded into `ErrorType` through `Diagnostic.convert`."""

    TRAILING_WHITESPACE = auto()


STYLE_TO_ERROR_TYPE: dict[StyleLint, ErrorType] = {
    StyleLint.TRAILING_WHITESPACE: ErrorType.STYLE,
}


def parse_error() -> Diagnostic[ErrorType]:
    """A parse failure whose context is the underlying exception text."""
    reason: str = ""
    try:
        int("oops")
    except ValueError as exc:
        reason = str(exc)
    return (
        Diagnostic(ErrorType.PARSE_ERROR)
        .with_message("I did really expect to parse it as an integer.")
        .with_context(Context.line(reason))
    )


def divide_by_zero() -> Diagnostic[ErrorType]:
    """A diagnostic without context, carrying help and a url."""
    return (
        Diagnostic(ErrorType.DIVIDE_BY_ZERO)
        .with_help("Divide by 0 is mathematically undefined so it cannot be completed.")
        .with_url("https://www.mathsisfun.com/numbers/dividing-by-zero.html")
    )


def integer_overflow() -> Diagnostic[ErrorType]:
    """A diagnostic spanning two contexts with several highlights of mixed severity."""
    settings = (
        Context.from_lines(["import math", "OVERFLOW_CHECKS = True", ""])
        .with_linenumber(5)
        .with_file("calc/settings.py")
        .with_highlight(Highlight(1, 0, 15).with_note("Overflow checks are enabled here").as_info())
    )
    body = (
        Context.from_lines(
            [
                "def calc(test: int) -> int:",
                "    n = 123",
                "    x = n * test",
                "    return x",
            ]
        )
        .with_linenumber(121)
        .with_file("calc/core.py")
        .with_before(["@checked"])
        .with_after(["", "def other() -> None:"])
        .with_highlights(
            [
                Highlight(2, 8, 8).with_note("Overflow happened here"),
                Highlight(1, 4, 1).with_note("'n' is small").as_info(),
                Highlight(0, 9, 4).with_note("'test' is unconstrained").as_info(),
            ]
        )
    )
    return (
        Diagnostic.here(ErrorType.INTEGER_OVERFLOW, "Integer overflow")
        .with_contexts([settings, body])
        .with_message("The product does not fit in a 64-bit register.")
    )


def trailing_whitespace() -> Diagnostic[StyleLint]:
    """A warning from the secondary taxonomy, without line numbers."""
    return (
        Diagnostic(StyleLint.TRAILING_WHITESPACE, "Trailing whitespace")
        .as_warning()
        .with_context(Context.line("x = 1   ").with_highlight((5, 3)))
        .with_help("Remove the spaces at the end of the line.")
    )


def showcase_report() -> DiagnosticSet[ErrorType]:
    """Return every showcase diagnostic in one report."""
    report: DiagnosticSet[ErrorType] = DiagnosticSet.from_iterable(
        [parse_error(), divide_by_zero(), integer_overflow()]
    )
    report.push(trailing_whitespace().convert(STYLE_TO_ERROR_TYPE.__getitem__))
    report.push(
        Diagnostic(ErrorType.STYLE, "Consider a named constant")
        .as_info()
        .with_context(
            Context.line("    n = 123")
            .with_linenumber(122)
            .with_highlight(Highlight(0, 8, 3).with_note("magic number").as_info())
        )
    )
    return report

# topmark:header:start
#
#   project      : Errata
#   file         : test_showcase_sample.py
#   file_relpath : tests/samples/test_showcase_sample.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the showcase diagnostics rendered by ``errata demo``."""

from __future__ import annotations

import click

from errata.diagnostic.severity import Severity
from errata.samples.showcase import (
    ErrorType,
    divide_by_zero,
    integer_overflow,
    parse_error,
    showcase_report,
    trailing_whitespace,
)
from tests.conftest import COLOR, PLAIN


def test_parse_error_carries_the_exception_text() -> None:
    diag = parse_error()
    assert diag.render_lines() == [
        "error: ErrorType.PARSE_ERROR",
        "",
        "  ╷",
        "0 │ invalid literal for int() with base 10: 'oops'",
        "  ╵",
        "I did really expect to parse it as an integer.",
    ]


def test_divide_by_zero_has_url_and_help() -> None:
    assert divide_by_zero().render_lines() == [
        "error: ErrorType.DIVIDE_BY_ZERO",
        "url: https://www.mathsisfun.com/numbers/dividing-by-zero.html",
        "  help: Divide by 0 is mathematically undefined so it cannot be completed.",
    ]


def test_integer_overflow_settings_context() -> None:
    settings = integer_overflow().contexts[0]
    assert settings.render_lines() == [
        "  ╭──[calc/settings.py:6:0]",
        "  │",
        "5 │ import math",
        "6 │ OVERFLOW_CHECKS = True",
        "  · " + "─" * 15 + " Overflow checks are enabled here",
        "7 │",
        "  ╵",
    ]


def test_integer_overflow_body_context() -> None:
    body = integer_overflow().contexts[1]
    assert body.render_lines() == [
        "    ╭──[calc/core.py]",
        "    │",
        "120 │ @checked",
        "121 │ def calc(test: int) -> int:",
        "    · " + " " * 9 + "──── 'test' is unconstrained",
        "122 │     n = 123",
        "    · " + " " * 4 + "─ 'n' is small",
        "123 │     x = n * test",
        "    · " + " " * 8 + "──────── Overflow happened here",
        "124 │     return x",
        "125 │",
        "126 │ def other() -> None:",
        "    ╵",
    ]


def test_integer_overflow_header() -> None:
    lines = integer_overflow().render_lines()
    assert lines[0] == "error: Integer overflow (ErrorType.INTEGER_OVERFLOW)"
    assert lines[1].startswith("  --> ")
    assert "showcase.py:" in lines[1]
    assert lines[-1] == "The product does not fit in a 64-bit register."


def test_trailing_whitespace_is_a_warning_without_line_numbers() -> None:
    diag = trailing_whitespace()
    assert diag.severity is Severity.WARNING
    assert diag.render_lines() == [
        "warning: Trailing whitespace (StyleLint.TRAILING_WHITESPACE)",
        "",
        "  ╷",
        "0 │ x = 1   ",
        "  · " + " " * 5 + "───",
        "  ╵",
        "  help: Remove the spaces at the end of the line.",
    ]


def test_showcase_report_folds_every_kind_into_error_type() -> None:
    report = showcase_report()
    assert all(isinstance(d.kind, ErrorType) for d in report)
    assert [d.kind for d in report] == [
        ErrorType.PARSE_ERROR,
        ErrorType.DIVIDE_BY_ZERO,
        ErrorType.INTEGER_OVERFLOW,
        ErrorType.STYLE,
        ErrorType.STYLE,
    ]
    assert report.summary() == "encountered: 3 errors, 1 warnings, 1 infos"
    assert "warning: Trailing whitespace (ErrorType.STYLE)" in report.render().splitlines()


def test_showcase_report_colored_has_the_same_visible_text() -> None:
    report = showcase_report()
    assert click.unstyle(report.render(COLOR)) == report.render(PLAIN)

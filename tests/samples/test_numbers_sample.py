# topmark:header:start
#
#   project      : Errata
#   file         : test_numbers_sample.py
#   file_relpath : tests/samples/test_numbers_sample.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the ``help <number>`` file checker."""

from __future__ import annotations

import pytest

from errata.diagnostic.errors import DiagnosticSetError
from errata.samples.numbers import NumberFileError, collect_number_diagnostics, parse_numbers


def test_clean_input_yields_numbers_and_no_diagnostics() -> None:
    numbers, report = collect_number_diagnostics("# numbers\n\nhelp 1\n  help 007\nhelp 42\n")
    assert numbers == [1, 7, 42]
    assert report.is_empty()
    assert str(report) == "no messages!"


def test_not_a_number() -> None:
    numbers, report = collect_number_diagnostics("help 1\nhelp x\n")
    assert numbers == [1]
    [diag] = list(report)
    assert diag.kind is NumberFileError.NOT_A_NUMBER
    assert diag.title == "Not a valid number"
    assert diag.message == "After the 'help' a number should be written"
    assert diag.help == "'x' is not a non-negative integer"
    [context] = diag.contexts
    assert context.render_lines() == [
        "  ╷",
        "1 │ help 1",
        "2 │ help x",
        "  · " + " " * 5 + "─ not a number",
        "  ╵",
    ]


def test_file_name_appears_in_the_context_header() -> None:
    _, report = collect_number_diagnostics("help 1\nhelp x\nhelp 3\n", file="nums.txt")
    [diag] = list(report)
    assert diag.contexts[0].render_lines()[:2] == ["  ╭──[nums.txt:2:5]", "  │"]
    assert diag.contexts[0].line_labels() == (["1"], ["2"], ["3"])


def test_every_problem_is_collected() -> None:
    numbers, report = collect_number_diagnostics("hello 1 2\nfoo 3\nhelp y\n")
    assert numbers == [3]
    assert [d.kind for d in report] == [
        NumberFileError.INCORRECT_NUMBER_OF_ARGUMENTS,
        NumberFileError.MISSING_HELP,
        NumberFileError.NOT_A_NUMBER,
    ]
    assert report.summary() == "encountered: 3 errors"


def test_wrong_argument_count_highlights_all_tokens() -> None:
    _, report = collect_number_diagnostics("hello 1 2\n")
    [diag] = list(report)
    [highlight] = diag.contexts[0].highlights
    assert (highlight.line_offset, highlight.column, highlight.length) == (0, 0, 9)
    assert highlight.note == "expected 2 fields, found 3"


def test_single_token_line() -> None:
    _, report = collect_number_diagnostics("  help\n")
    [diag] = list(report)
    assert diag.kind is NumberFileError.INCORRECT_NUMBER_OF_ARGUMENTS
    [highlight] = diag.contexts[0].highlights
    assert (highlight.column, highlight.length) == (2, 4)
    assert highlight.note == "expected 2 fields, found 1"


def test_missing_keyword_and_bad_value_are_both_reported() -> None:
    numbers, report = collect_number_diagnostics("foo x\n")
    assert numbers == []
    assert [d.kind for d in report] == [NumberFileError.MISSING_HELP, NumberFileError.NOT_A_NUMBER]
    [keyword_highlight] = report.items[0].contexts[0].highlights
    assert (keyword_highlight.column, keyword_highlight.length) == (0, 3)
    assert keyword_highlight.note == "expected 'help'"


@pytest.mark.parametrize("value", ["-1", "1.5", "٣", "0x10", "one"])
def test_values_must_be_plain_ascii_digits(value: str) -> None:
    numbers, report = collect_number_diagnostics(f"help {value}\n")
    assert numbers == []
    assert [d.kind for d in report] == [NumberFileError.NOT_A_NUMBER]


def test_undecodable_line_is_reported_and_skipped() -> None:
    numbers, report = collect_number_diagnostics(b"help 1\n\xff\xfe\nhelp 2\n")
    assert numbers == [1, 2]
    [diag] = list(report)
    assert diag.kind is NumberFileError.INVALID_LINE
    assert diag.message == "Line 2 is not valid UTF-8"
    assert diag.contexts == ()


def test_neighbours_skip_undecodable_lines() -> None:
    _, report = collect_number_diagnostics(b"\xff\nhelp z\n")
    assert [d.kind for d in report] == [NumberFileError.INVALID_LINE, NumberFileError.NOT_A_NUMBER]
    assert report.items[1].contexts[0].context_before is None


def test_str_and_bytes_input_agree() -> None:
    text = "help 1\nnope\nhelp q\n"
    from_str = collect_number_diagnostics(text)
    from_bytes = collect_number_diagnostics(text.encode("utf-8"))
    assert from_str[0] == from_bytes[0]
    assert [d.kind for d in from_str[1]] == [d.kind for d in from_bytes[1]]
    assert [d.contexts for d in from_str[1]] == [d.contexts for d in from_bytes[1]]


def test_diagnostics_record_where_they_were_created() -> None:
    _, report = collect_number_diagnostics("help x\n")
    [diag] = list(report)
    assert diag.location is not None
    assert "numbers.py:" in diag.location
    assert "  --> " in diag.render()


def test_parse_numbers_returns_numbers_when_clean() -> None:
    assert parse_numbers("help 3\nhelp 4\n") == [3, 4]


def test_parse_numbers_raises_with_every_problem() -> None:
    with pytest.raises(DiagnosticSetError) as excinfo:
        parse_numbers("help 1\nhelp a\nhelp b\n", file="in.txt")
    report = excinfo.value.diagnostics
    assert len(report) == 2
    assert str(excinfo.value).endswith("encountered: 2 errors")

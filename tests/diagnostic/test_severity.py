# topmark:header:start
#
#   project      : Errata
#   file         : test_severity.py
#   file_relpath : tests/diagnostic/test_severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Severity` labels, ordering and colorization."""

from __future__ import annotations

import click

from errata.diagnostic.severity import Severity
from tests.conftest import parametrize


def test_declaration_order_is_error_warning_info() -> None:
    """Summary lines rely on the declaration order of severities."""
    assert list(Severity) == [Severity.ERROR, Severity.WARNING, Severity.INFO]


@parametrize(
    "severity, label, plural",
    [
        (Severity.ERROR, "error", "errors"),
        (Severity.WARNING, "warning", "warnings"),
        (Severity.INFO, "info", "infos"),
    ],
)
def test_labels(severity: Severity, label: str, plural: str) -> None:
    assert severity.label == label
    assert severity.value == label
    assert severity.plural_label == plural


def test_severity_is_a_str() -> None:
    assert Severity.ERROR == "error"
    assert isinstance(Severity.WARNING, str)


def test_colorize_disabled_is_identity() -> None:
    assert Severity.ERROR.colorize("boom", enabled=False) == "boom"


@parametrize("severity", list(Severity))
def test_colorize_enabled_preserves_text(severity: Severity) -> None:
    """Styling may add escape codes but never changes the visible text."""
    assert click.unstyle(severity.colorize("some text")) == "some text"


def test_colorize_empty_text_stays_empty() -> None:
    assert Severity.INFO.colorize("", enabled=True) == ""

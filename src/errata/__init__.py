# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata package.

Errata renders compiler-style diagnostics: a severity/title line, optional url and
location, source excerpts with aligned line numbers and underlined highlights, a
message and a help hint. Diagnostics can be collected into a `DiagnosticSet` that
renders as one report with a per-severity summary.

Example:
    ```python
    from enum import Enum, auto

    from errata import Context, Diagnostic, DiagnosticSet

    class ParseError(Enum):
        NOT_A_NUMBER = auto()

    report: DiagnosticSet[ParseError] = DiagnosticSet()
    report += (
        Diagnostic.here(ParseError.NOT_A_NUMBER, "Not a valid number")
        .with_context(Context.line("help x").with_linenumber(3).with_highlight((0, 5, 1)))
    )
    print(report)
    ```
"""

from __future__ import annotations

from errata.config.model import RenderConfig
from errata.diagnostic import (
    Context,
    Diagnostic,
    DiagnosticError,
    DiagnosticSet,
    DiagnosticSetError,
    Highlight,
    Severity,
)

__all__ = [
    "Context",
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticSet",
    "DiagnosticSetError",
    "Highlight",
    "RenderConfig",
    "Severity",
]

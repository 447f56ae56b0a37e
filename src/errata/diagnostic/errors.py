# topmark:header:start
#
#   project      : Errata
#   file         : errors.py
#   file_relpath : src/errata/diagnostic/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions that carry diagnostics.

Raise `DiagnosticError` to abort with a single diagnostic, or `DiagnosticSetError`
once a whole report has been collected. ``str()`` of either renders plain text;
call ``.diagnostic.render(config)`` / ``.diagnostics.render(config)`` for color.

Usage:
    ```python
    try:
        value = parse(text)
    except DiagnosticError as exc:
        report.extend([exc])  # DiagnosticError provides to_diagnostic()
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from errata.diagnostic.collection import DiagnosticSet
    from errata.diagnostic.model import Diagnostic

K = TypeVar("K")


class DiagnosticError(Exception, Generic[K]):
    """Exception wrapping one `Diagnostic`."""

    diagnostic: Diagnostic[K]

    def __init__(self, diagnostic: Diagnostic[K]) -> None:
        super().__init__(diagnostic.title or diagnostic.kind_tag)
        self.diagnostic = diagnostic

    def to_diagnostic(self) -> Diagnostic[K]:
        """Return the wrapped diagnostic."""
        return self.diagnostic

    def __str__(self) -> str:
        return self.diagnostic.render()


class DiagnosticSetError(Exception, Generic[K]):
    """Exception wrapping a collected `DiagnosticSet`."""

    diagnostics: DiagnosticSet[K]

    def __init__(self, diagnostics: DiagnosticSet[K]) -> None:
        super().__init__(f"{len(diagnostics)} diagnostic(s)")
        self.diagnostics = diagnostics

    def __str__(self) -> str:
        return self.diagnostics.render()

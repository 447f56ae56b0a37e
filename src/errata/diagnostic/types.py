# topmark:header:start
#
#   project      : Errata
#   file         : types.py
#   file_relpath : src/errata/diagnostic/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared typing helpers for Errata diagnostics.

This module defines small Protocols used to express "diagnostic-carrying" objects
structurally, so `DiagnosticSet` can absorb values (such as `DiagnosticError`
exceptions) without depending on their concrete classes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, Union

if TYPE_CHECKING:
    from errata.diagnostic.model import Diagnostic

K = TypeVar("K")


class IntoDiagnostic(Protocol[K]):
    """Structural interface for values convertible into a `Diagnostic`."""

    def to_diagnostic(self) -> Diagnostic[K]:
        """Return the diagnostic this value stands for."""
        ...


DiagnosticLike = Union["Diagnostic[K]", IntoDiagnostic[K]]

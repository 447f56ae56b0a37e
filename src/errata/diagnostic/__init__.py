# topmark:header:start
#
#   project      : Errata
#   file         : __init__.py
#   file_relpath : src/errata/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic primitives and rendering.

Design:
    - `Highlight` values attach to a `Context`, contexts attach to a `Diagnostic`,
      and diagnostics are collected in a `DiagnosticSet`.
    - `Highlight`, `Context` and `Diagnostic` are immutable; their builders return
      updated copies. Only `DiagnosticSet` is mutable (append-only).
    - Every value renders to plain text by default; pass a `RenderConfig` with
      ``color=True`` for ANSI output.
"""

from __future__ import annotations

from errata.diagnostic.collection import (
    DiagnosticSet,
    DiagnosticStats,
    compute_diagnostic_stats,
    to_diagnostic,
)
from errata.diagnostic.context import Context
from errata.diagnostic.errors import DiagnosticError, DiagnosticSetError
from errata.diagnostic.highlight import Highlight, HighlightLike
from errata.diagnostic.model import Diagnostic
from errata.diagnostic.severity import Severity
from errata.diagnostic.types import DiagnosticLike, IntoDiagnostic

__all__ = [
    "Context",
    "Diagnostic",
    "DiagnosticError",
    "DiagnosticLike",
    "DiagnosticSet",
    "DiagnosticSetError",
    "DiagnosticStats",
    "Highlight",
    "HighlightLike",
    "IntoDiagnostic",
    "Severity",
    "compute_diagnostic_stats",
    "to_diagnostic",
]

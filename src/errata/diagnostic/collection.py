# topmark:header:start
#
#   project      : Errata
#   file         : collection.py
#   file_relpath : src/errata/diagnostic/collection.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Aggregation of diagnostics into a report.

Sections:
    * DiagnosticStats: aggregated per-severity counts.
    * DiagnosticSet: mutable, append-only collection with severity queries and a
      combined rendering that ends with a summary line.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from errata.config.logging import get_logger
from errata.config.model import DEFAULT_RENDER_CONFIG
from errata.constants import SUMMARY_NO_MESSAGES, SUMMARY_PREFIX
from errata.diagnostic.model import Diagnostic
from errata.diagnostic.severity import Severity
from errata.rendering.color import Role, colorize

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from errata.config.logging import ErrataLogger
    from errata.config.model import RenderConfig
    from errata.diagnostic.types import DiagnosticLike


logger: ErrataLogger = get_logger(__name__)

K = TypeVar("K")
K2 = TypeVar("K2")


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by severity."""

    n_error: int
    n_warning: int
    n_info: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return self.n_error + self.n_warning + self.n_info

    def count(self, severity: Severity) -> int:
        """Return the count for one severity."""
        return {
            Severity.ERROR: self.n_error,
            Severity.WARNING: self.n_warning,
            Severity.INFO: self.n_info,
        }[severity]


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic[Any]]) -> DiagnosticStats:
    """Return per-severity counts for any iterable of diagnostics."""
    n_err = n_warn = n_info = 0
    for d in diagnostics:
        if d.severity == Severity.ERROR:
            n_err += 1
        elif d.severity == Severity.WARNING:
            n_warn += 1
        else:
            n_info += 1
    return DiagnosticStats(n_error=n_err, n_warning=n_warn, n_info=n_info)


def to_diagnostic(value: DiagnosticLike[K]) -> Diagnostic[K]:
    """Return ``value`` as a `Diagnostic`.

    Args:
        value: A diagnostic, or any object with a ``to_diagnostic()`` method.

    Returns:
        The diagnostic.

    Raises:
        TypeError: If ``value`` cannot be converted.
    """
    if isinstance(value, Diagnostic):
        return value  # pyright: ignore[reportUnknownVariableType]
    convert: object = getattr(value, "to_diagnostic", None)
    if callable(convert):
        result: object = convert()
        if isinstance(result, Diagnostic):
            return result  # pyright: ignore[reportUnknownVariableType]
    raise TypeError(f"{type(value).__name__} cannot be converted into a Diagnostic")


@dataclass
class DiagnosticSet(Generic[K]):
    """Ordered, append-only collection of diagnostics sharing one kind type.

    Diagnostics are added with `push` (or ``+=``) and `extend`; there is no removal.
    The set is not synchronized: share it between threads only behind a lock.
    """

    items: list[Diagnostic[K]] = field(default_factory=lambda: [])

    @classmethod
    def from_iterable(cls, values: Iterable[DiagnosticLike[K]]) -> DiagnosticSet[K]:
        """Create a set from diagnostics or values convertible into one.

        Args:
            values: Diagnostics, or objects providing ``to_diagnostic()``.

        Returns:
            A new set holding the converted values in order.
        """
        return cls(items=[to_diagnostic(v) for v in values])

    def push(self, diagnostic: Diagnostic[K]) -> None:
        """Append one diagnostic."""
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %s", diagnostic.severity.label, diagnostic.kind_tag)

    def __iadd__(self, diagnostic: Diagnostic[K]) -> DiagnosticSet[K]:
        self.push(diagnostic)
        return self

    def extend(self, values: Iterable[DiagnosticLike[K]]) -> None:
        """Append diagnostics, or values convertible into one, in order."""
        for value in values:
            self.push(to_diagnostic(value))

    def update_each(self, func: Callable[[Diagnostic[K]], Diagnostic[K]]) -> None:
        """Replace every diagnostic with ``func(diagnostic)``, keeping the order.

        Diagnostics are immutable, so this is how a collected set is edited in place
        (e.g. to downgrade every entry to a warning).
        """
        self.items = [func(d) for d in self.items]

    def convert(self, mapping: Callable[[K], K2]) -> DiagnosticSet[K2]:
        """Return a new set with every kind re-tagged through ``mapping``."""
        return DiagnosticSet(items=[d.convert(mapping) for d in self.items])

    # --- queries ---

    def is_empty(self) -> bool:
        """Return True if no diagnostic was added."""
        return not self.items

    def any_errors(self) -> bool:
        """Return True if at least one diagnostic has error severity."""
        return any(d.is_error() for d in self.items)

    def any_errors_or_warnings(self) -> bool:
        """Return True if at least one diagnostic is an error or a warning."""
        return any(d.is_error() or d.is_warning() for d in self.items)

    def stats(self) -> DiagnosticStats:
        """Return per-severity counts for this set."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by severity.

        Returns:
            Mapping with keys ``"error"``, ``"warning"`` and ``"info"``.
        """
        stats: DiagnosticStats = self.stats()
        return {
            "error": stats.n_error,
            "warning": stats.n_warning,
            "info": stats.n_info,
        }

    def __iter__(self) -> Iterator[Diagnostic[K]]:
        """Iterate over the diagnostics in insertion order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics in the set."""
        return len(self.items)

    # --- rendering ---

    def summary(self, config: RenderConfig | None = None) -> str:
        """Return the summary line, e.g. ``"encountered: 2 errors, 1 warnings"``.

        Non-zero counts are listed in error, warning, info order. A set without any
        diagnostic reports ``"no messages!"``.
        """
        color: bool = (config or DEFAULT_RENDER_CONFIG).color
        stats: DiagnosticStats = self.stats()
        if stats.total == 0:
            return colorize(SUMMARY_NO_MESSAGES, Role.SUCCESS, enabled=color)
        parts: list[str] = [
            f"{stats.count(severity)} {severity.colorize(severity.plural_label, enabled=color)}"
            for severity in Severity
            if stats.count(severity)
        ]
        return SUMMARY_PREFIX + ", ".join(parts)

    def render_lines(self, config: RenderConfig | None = None) -> list[str]:
        """Render every diagnostic followed by a blank line, then the summary."""
        lines: list[str] = []
        for diagnostic in self.items:
            lines.extend(diagnostic.render_lines(config))
            lines.append("")
        lines.append(self.summary(config))
        logger.trace("Rendered %d diagnostic(s) into %d line(s)", len(self.items), len(lines))
        return lines

    def render(self, config: RenderConfig | None = None) -> str:
        """Render the report as a single newline-joined string."""
        return "\n".join(self.render_lines(config))

    def __str__(self) -> str:
        return self.render()

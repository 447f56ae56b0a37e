# topmark:header:start
#
#   project      : Errata
#   file         : model.py
#   file_relpath : src/errata/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""The `Diagnostic` value and its rendering.

A diagnostic is an immutable value: its ``with_*`` / ``as_*`` builders return
updated copies, so independently built diagnostics never share mutable state.

Rendered layout (fixed order, optional parts are skipped when unset):

```text
error: Not a valid number (ParseError.NOT_A_NUMBER)
url: https://example.org/errors/not-a-number
  --> tools/numbers.py:41:13

  ╷
3 │ help three
  ╵
After the 'help' a number should be written
  help: invalid literal for int() with base 10: 'three'
```
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Generic, TypeVar

from errata.config.logging import get_logger
from errata.config.model import DEFAULT_RENDER_CONFIG
from errata.constants import GLYPH_LOCATION_ARROW
from errata.diagnostic.severity import Severity
from errata.rendering.color import Role, colorize
from errata.utils.introspection import caller_location, describe_kind

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from errata.config.logging import ErrataLogger
    from errata.config.model import RenderConfig
    from errata.diagnostic.context import Context


logger: ErrataLogger = get_logger(__name__)

K = TypeVar("K")
K2 = TypeVar("K2")


@dataclass(frozen=True)
class Diagnostic(Generic[K]):
    """One reportable message with optional source contexts.

    Attributes:
        kind: Caller-defined taxonomy value (typically an `Enum` member). It is
            always rendered together with its type name.
        severity: Error (default), warning or info.
        title: Short headline; the kind tag stands in when it is missing.
        message: Free-form explanation printed after the contexts.
        help: Hint printed last.
        url: Link to further documentation.
        contexts: Source excerpts, rendered in attachment order.
        location: Where the diagnostic was created (``path:line:column``).
    """

    kind: K
    severity: Severity = Severity.ERROR
    title: str | None = None
    message: str | None = None
    help: str | None = None
    url: str | None = None
    contexts: tuple[Context, ...] = field(default=())
    location: str | None = None

    @classmethod
    def here(cls, kind: K, title: str | None = None, *, stacklevel: int = 1) -> Diagnostic[K]:
        """Create a diagnostic whose location is the calling line.

        Args:
            kind: Caller-defined kind value.
            title: Optional headline.
            stacklevel: Frame to attribute the location to: ``1`` is the direct
                caller; raise it when calling from a helper.

        Returns:
            A new error-severity diagnostic with `location` set.
        """
        return cls(kind=kind, title=title, location=caller_location(stacklevel))

    # --- builders ---

    def with_title(self, title: str) -> Diagnostic[K]:
        """Return a copy with the given headline."""
        return replace(self, title=title)

    def with_message(self, message: str) -> Diagnostic[K]:
        """Return a copy with the given free-form message."""
        return replace(self, message=message)

    def with_help(self, help: str) -> Diagnostic[K]:
        """Return a copy with the given help hint."""
        return replace(self, help=help)

    def with_url(self, url: str) -> Diagnostic[K]:
        """Return a copy with the given documentation link."""
        return replace(self, url=url)

    def with_location(self, location: str) -> Diagnostic[K]:
        """Return a copy attributed to ``location``.

        Prefer [`Diagnostic.here`][errata.diagnostic.model.Diagnostic.here], which
        captures the call site automatically.
        """
        return replace(self, location=location)

    def with_context(self, context: Context) -> Diagnostic[K]:
        """Return a copy with ``context`` appended to the existing contexts."""
        return replace(self, contexts=(*self.contexts, context))

    def with_contexts(self, contexts: Iterable[Context]) -> Diagnostic[K]:
        """Return a copy with all ``contexts`` appended in order."""
        return replace(self, contexts=(*self.contexts, *contexts))

    def as_warning(self) -> Diagnostic[K]:
        """Return a copy with warning severity."""
        return replace(self, severity=Severity.WARNING)

    def as_info(self) -> Diagnostic[K]:
        """Return a copy with info severity."""
        return replace(self, severity=Severity.INFO)

    # --- queries ---

    def is_error(self) -> bool:
        """Return True if this diagnostic has error severity."""
        return self.severity == Severity.ERROR

    def is_warning(self) -> bool:
        """Return True if this diagnostic has warning severity."""
        return self.severity == Severity.WARNING

    def is_info(self) -> bool:
        """Return True if this diagnostic has info severity."""
        return self.severity == Severity.INFO

    @property
    def kind_tag(self) -> str:
        """Return the type-qualified kind, e.g. ``"ParseError.NOT_A_NUMBER"``."""
        return describe_kind(self.kind)

    def convert(self, mapping: Callable[[K], K2]) -> Diagnostic[K2]:
        """Re-tag this diagnostic with ``mapping(kind)``.

        Every other field is carried over unchanged. ``mapping`` must accept every
        value of the current kind type.

        Args:
            mapping: Total function from the current kind type to the target type.

        Returns:
            A diagnostic of the target kind type.
        """
        new_kind: K2 = mapping(self.kind)
        logger.trace("Converting %s -> %s", self.kind_tag, describe_kind(new_kind))
        return Diagnostic(
            kind=new_kind,
            severity=self.severity,
            title=self.title,
            message=self.message,
            help=self.help,
            url=self.url,
            contexts=self.contexts,
            location=self.location,
        )

    # --- rendering ---

    def render_lines(self, config: RenderConfig | None = None) -> list[str]:
        """Render this diagnostic as a list of display lines.

        Args:
            config: Render options; plain text when omitted.

        Returns:
            The header line, then url, location, contexts (each preceded by a blank
            line), message and help, skipping whatever is unset.
        """
        color: bool = (config or DEFAULT_RENDER_CONFIG).color
        severity: str = self.severity.colorize(self.severity.label, enabled=color)
        if self.title:
            lines: list[str] = [f"{severity}: {self.title} ({self.kind_tag})"]
        else:
            lines = [f"{severity}: {self.kind_tag}"]

        if self.url is not None:
            url_label: str = colorize("url", Role.ACCENT, enabled=color)
            lines.append(f"{url_label}: {colorize(self.url, Role.ACCENT, enabled=color)}")
        if self.location is not None:
            arrow: str = colorize(GLYPH_LOCATION_ARROW, Role.ACCENT, enabled=color)
            lines.append(f"  {arrow} {self.location}")
        for context in self.contexts:
            lines.append("")
            lines.extend(context.render_lines(config))
        if self.message is not None:
            lines.append(self.message)
        if self.help is not None:
            lines.append(f"  {colorize('help', Role.ACCENT, enabled=color)}: {self.help}")
        return lines

    def render(self, config: RenderConfig | None = None) -> str:
        """Render this diagnostic as a single newline-joined string."""
        return "\n".join(self.render_lines(config))

    def __str__(self) -> str:
        return self.render()

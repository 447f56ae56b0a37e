# topmark:header:start
#
#   project      : Errata
#   file         : model.py
#   file_relpath : src/errata/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render configuration.

`RenderConfig` is the immutable settings object threaded through every render
entry point (`Context.render`, `Diagnostic.render`, `DiagnosticSet.render`). The
default instance renders plain text so that `str()` on any diagnostic value is
deterministic; front ends resolve color from flags and environment with
[`RenderConfig.from_environment`][errata.config.model.RenderConfig.from_environment].
"""

from __future__ import annotations

from dataclasses import dataclass

from errata.config.logging import get_logger
from errata.rendering.color import ColorMode, resolve_color_mode

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable options controlling how diagnostics are rendered.

    Attributes:
        color: Emit ANSI styles for severities, gutter glyphs and accents.
    """

    color: bool = False

    @classmethod
    def from_environment(
        cls,
        color_mode: ColorMode | None = None,
        *,
        stdout_isatty: bool | None = None,
    ) -> RenderConfig:
        """Build a config by resolving the color mode against flags, env and TTY.

        Args:
            color_mode: Explicit color intent (e.g. from ``--color``); ``None`` means auto.
            stdout_isatty: Optional TTY override, mainly for tests.

        Returns:
            The resolved configuration.
        """
        color = resolve_color_mode(
            color_mode_override=color_mode,
            stdout_isatty=stdout_isatty,
        )
        logger.debug("Resolved render config: color=%s (mode=%s)", color, color_mode)
        return cls(color=color)


DEFAULT_RENDER_CONFIG: RenderConfig = RenderConfig()

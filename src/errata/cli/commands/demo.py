# topmark:header:start
#
#   project      : Errata
#   file         : demo.py
#   file_relpath : src/errata/cli/commands/demo.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata `demo` command.

Renders the showcase report: a parse error with context, a diagnostic carrying help
and a url, a multi-context overflow diagnostic, a converted style warning and an
info note, followed by the summary line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from errata.samples.showcase import showcase_report

if TYPE_CHECKING:
    from errata.cli.console import ConsoleLike
    from errata.config.model import RenderConfig


@click.command(
    name="demo",
    help="Render a gallery of example diagnostics.",
)
def demo_command() -> None:
    """Render the showcase report to stdout."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    config: RenderConfig = ctx.obj["render_config"]

    console.print(showcase_report().render(config))

# topmark:header:start
#
#   project      : Errata
#   file         : version.py
#   file_relpath : src/errata/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata `version` command.

Prints the current Errata version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from errata.constants import ERRATA_VERSION

if TYPE_CHECKING:
    from errata.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of Errata.",
)
def version_command() -> None:
    """Show the current version of Errata."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Errata version:", bold=True, underline=True))
        console.print(f"    {console.styled(ERRATA_VERSION, bold=True)}")
    else:
        console.print(console.styled(ERRATA_VERSION, bold=True))

# topmark:header:start
#
#   project      : Errata
#   file         : main.py
#   file_relpath : src/errata/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the Errata CLI.

Group-level options are resolved once and placed into ``ctx.obj``:

- ``console``: the [`ClickConsole`][errata.cli.console.ClickConsole] for program output.
- ``render_config``: the [`RenderConfig`][errata.config.model.RenderConfig] used by
  every command that renders diagnostics.
- ``verbosity_level``: the program-output level from ``-v``/``-q``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from errata.cli.commands.check_numbers import check_numbers_command
from errata.cli.commands.demo import demo_command
from errata.cli.commands.version import version_command
from errata.cli.console import ClickConsole
from errata.cli.options import common_color_options, common_verbose_options, resolve_verbosity
from errata.config.logging import get_logger, resolve_env_log_level, setup_logging
from errata.config.model import RenderConfig
from errata.rendering.color import ColorMode

if TYPE_CHECKING:
    from errata.cli.console import ConsoleLike
    from errata.config.logging import ErrataLogger

logger: ErrataLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    render_config = RenderConfig.from_environment(effective_color_mode)
    ctx.obj["render_config"] = render_config
    ctx.color = render_config.color

    ctx.obj["console"] = ClickConsole(enable_color=render_config.color)
    logger.debug(
        "CLI state: verbosity=%d color=%s", ctx.obj["verbosity_level"], render_config.color
    )


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Errata CLI: render compiler-style diagnostics.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Errata CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'errata demo' to see example diagnostics.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(demo_command)

cli.add_command(check_numbers_command)

if __name__ == "__main__":
    cli()

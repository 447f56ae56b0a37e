# topmark:header:start
#
#   project      : Errata
#   file         : options.py
#   file_relpath : src/errata/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared CLI options and option helpers for Errata.

This module provides reusable Click option decorators for verbosity and color output,
together with the helper that turns ``-v``/``-q`` counts into a program-output level.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from errata.cli.errors import ErrataUsageError
from errata.rendering.color import ColorMode

P = ParamSpec("P")
R = TypeVar("R")

#: Upper bound for ``-v``/``-q`` counts; further flags are accepted but ignored.
MAX_VERBOSITY: int = 2


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output verbosity from the verbose and quiet counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        The verbosity level: ``0`` by default, ``1``/``2`` for ``-v``/``-vv``,
        ``-1``/``-2`` for ``-q``/``-qq``.

    Raises:
        ErrataUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ErrataUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count > 0:
        return min(verbose_count, MAX_VERBOSITY)
    if quiet_count > 0:
        return -min(quiet_count, MAX_VERBOSITY)
    return 0


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output. Specify up to twice for even less.",
    )(f)
    return f


def _to_color_mode(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> ColorMode | None:
    """Turn the validated ``--color`` choice into a `ColorMode`."""
    return None if value is None else ColorMode(value)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([mode.value for mode in ColorMode], case_sensitive=False),
        callback=_to_color_mode,
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f

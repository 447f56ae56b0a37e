# topmark:header:start
#
#   project      : Errata
#   file         : check_numbers.py
#   file_relpath : src/errata/cli/commands/check_numbers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Errata `check-numbers` command.

Validates a ``help <number>`` file and reports every malformed line as a diagnostic.
When the file is clean the numbers are echoed one per line.

Exit codes:
    - ``SUCCESS`` (0): no error diagnostics.
    - ``FAILURE`` (1): at least one error diagnostic was reported.
    - ``FILE_NOT_FOUND`` (66): the path does not exist.
    - ``IO_ERROR`` (74): the path could not be read.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from errata.cli.errors import ErrataFileNotFoundError, ErrataIOError
from errata.cli.exit_codes import ExitCode
from errata.config.logging import get_logger
from errata.samples.numbers import collect_number_diagnostics

if TYPE_CHECKING:
    from errata.cli.console import ConsoleLike
    from errata.config.logging import ErrataLogger
    from errata.config.model import RenderConfig

logger: ErrataLogger = get_logger(__name__)


@click.command(
    name="check-numbers",
    help="Validate a file of 'help <number>' lines and report malformed lines.",
)
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def check_numbers_command(path: Path) -> None:
    """Parse ``path`` and print either its numbers or the diagnostic report.

    Args:
        path (Path): File to validate.

    Raises:
        ErrataFileNotFoundError: If ``path`` does not exist.
        ErrataIOError: If ``path`` cannot be read.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    config: RenderConfig = ctx.obj["render_config"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    if not path.exists():
        raise ErrataFileNotFoundError(f"No such file: {path}")
    try:
        raw: bytes = path.read_bytes()
    except OSError as exc:
        raise ErrataIOError(f"Cannot read {path}: {exc}") from exc

    logger.info("Checking %s (%d bytes)", path, len(raw))
    numbers, report = collect_number_diagnostics(raw, file=str(path))

    if not report.is_empty():
        console.print(report.render(config))
        if report.any_errors():
            ctx.exit(ExitCode.FAILURE)
        return

    if vlevel > 0:
        console.print(console.styled(f"{len(numbers)} number(s) in {path}:", bold=True))
    if vlevel >= 0:
        for number in numbers:
            console.print(str(number))

# topmark:header:start
#
#   project      : Errata
#   file         : errors.py
#   file_relpath : src/errata/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the Errata CLI.

Raise these in commands to stop with a standardized message and exit code. They
prefer the project console if one is present in the Click context (see `show()`)
and fall back to Click's default error display otherwise.
"""

from __future__ import annotations

from typing import IO, Any

import click

from errata.cli.exit_codes import ExitCode


class ErrataError(click.ClickException):
    """Base class for all Errata CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (color is applied in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class ErrataUsageError(ErrataError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ErrataFileNotFoundError(ErrataError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class ErrataIOError(ErrataError):
    """Error when an input file cannot be read."""

    exit_code = ExitCode.IO_ERROR

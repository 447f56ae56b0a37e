# topmark:header:start
#
#   project      : Errata
#   file         : test_cli_options.py
#   file_relpath : tests/cli/test_cli_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the shared verbosity and color options."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from click.testing import CliRunner

from errata.cli.errors import ErrataUsageError
from errata.cli.main import cli
from errata.config.model import RenderConfig
from errata.cli.options import resolve_verbosity
from tests.cli.conftest import assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@pytest.mark.parametrize(
    "verbose, quiet, expected",
    [(0, 0, 0), (1, 0, 1), (2, 0, 2), (5, 0, 2), (0, 1, -1), (0, 3, -2)],
)
def test_resolve_verbosity(verbose: int, quiet: int, expected: int) -> None:
    assert resolve_verbosity(verbose, quiet) == expected


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    with pytest.raises(ErrataUsageError):
        resolve_verbosity(1, 1)


@mark_cli
def test_verbose_and_quiet_together_is_a_usage_error() -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert_USAGE_ERROR(result)


@mark_cli
def test_unknown_color_mode_is_rejected() -> None:
    result: Result = run_cli(["--color", "sometimes", "version"])
    assert result.exit_code == 2
    assert "sometimes" in result.output


@mark_cli
@pytest.mark.parametrize("mode", ["auto", "ALWAYS", "Never"])
def test_color_modes_are_case_insensitive(mode: str) -> None:
    result: Result = run_cli(["--color", mode, "version"])
    assert result.exit_code == 0, result.output


@mark_cli
def test_color_choice_is_normalized_before_rendering() -> None:
    result: Result = run_cli(["--color", "ALWAYS", "demo"])
    assert result.exit_code == 0, result.output
    assert "\x1b[" in result.output


@mark_cli
def test_group_state_holds_only_what_commands_read() -> None:
    obj: dict[str, object] = {"caller": True}
    result: Result = CliRunner().invoke(cli, ["-v", "--no-color", "version"], obj=obj)
    assert result.exit_code == 0, result.output
    assert set(obj) == {"caller", "verbosity_level", "render_config", "console"}
    assert obj["verbosity_level"] == 1
    assert obj["render_config"] == RenderConfig(color=False)

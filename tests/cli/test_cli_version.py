# topmark:header:start
#
#   project      : Errata
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for ``errata version`` and the bare group invocation."""

from __future__ import annotations

from typing import TYPE_CHECKING

from errata.constants import ERRATA_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from click.testing import Result


@mark_cli
def test_version_prints_the_installed_version() -> None:
    result: Result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.output.strip() == ERRATA_VERSION


@mark_cli
def test_version_verbose_adds_a_heading() -> None:
    result: Result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    assert result.output.splitlines() == ["Errata version:", f"    {ERRATA_VERSION}"]


@mark_cli
def test_group_without_subcommand_prints_help() -> None:
    result: Result = run_cli([])
    assert_SUCCESS(result)
    assert "errata demo" in result.output
    assert "check-numbers" in result.output
    assert "--no-color" in result.output

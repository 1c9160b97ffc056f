# topmark:header:start
#
#   project      : svgtidy
#   file         : test_config_cmd.py
#   file_relpath : tests/cli/test_config_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for `svgtidy config dump` and `svgtidy config defaults`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import toml

from svgtidy.cli_shared.exit_codes import ExitCode
from svgtidy.constants import DEFAULT_PRECISION
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path


@mark_cli
def test_defaults() -> None:
    result = run_cli(["config", "defaults"])
    assert_SUCCESS(result)
    assert result.stdout.startswith("# svgtidy effective configuration (built-in defaults)")
    data = toml.loads(result.stdout)
    assert data["precision"] == DEFAULT_PRECISION
    assert data["multipass"] is True
    assert data["enable"] == []


@mark_cli
def test_defaults_for_pyproject() -> None:
    result = run_cli(["config", "defaults", "--pyproject"])
    assert_SUCCESS(result)
    data = toml.loads(result.stdout)
    assert data["tool"]["svgtidy"]["precision"] == DEFAULT_PRECISION


@mark_cli
def test_dump_merges_discovered_files(isolation: Path) -> None:
    (isolation / "svgtidy.toml").write_text(
        'root = true\nprecision = 1\ndisable = ["sortAttrs"]\n', encoding="utf-8"
    )
    result = run_cli_in(isolation, ["config", "dump"])
    assert_SUCCESS(result)
    assert "merged from:" in result.stdout
    data = toml.loads(result.stdout)
    assert data["precision"] == 1
    assert data["disable"] == ["sortAttrs"]


@mark_cli
def test_dump_without_config(isolation: Path) -> None:
    (isolation / "svgtidy.toml").write_text("root = true\nprecision = 1\n", encoding="utf-8")
    result = run_cli_in(isolation, ["config", "dump", "--no-config"])
    assert_SUCCESS(result)
    assert toml.loads(result.stdout)["precision"] == DEFAULT_PRECISION


@mark_cli
def test_dump_reports_bad_files(isolation: Path) -> None:
    (isolation / "svgtidy.toml").write_text("root = true\nunknown = 1\n", encoding="utf-8")
    result = run_cli_in(isolation, ["config", "dump"])
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "unknown configuration key(s): unknown" in result.output

# topmark:header:start
#
#   project      : svgtidy
#   file         : test_passes_cmd.py
#   file_relpath : tests/cli/test_passes_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for `svgtidy passes`."""

from __future__ import annotations

from svgtidy.pipeline.pipelines import PASS_ORDER
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_lists_every_pass_in_order() -> None:
    result = run_cli(["--no-color", "passes", "--no-config"])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert len(lines) == len(PASS_ORDER)
    assert lines[0].startswith(" 1. on  removeDoctype ")
    for line, name in zip(lines, PASS_ORDER):
        assert f" {name} " in line


@mark_cli
def test_marks_opt_in_passes() -> None:
    result = run_cli(["--no-color", "passes", "--no-config"])
    line = next(x for x in result.stdout.splitlines() if " removeStyleElement " in x)
    assert " off " in line
    assert line.endswith("(off by default)")


@mark_cli
def test_reflects_enable_and_disable() -> None:
    result = run_cli(
        [
            "--no-color",
            "passes",
            "--no-config",
            "--enable",
            "removeStyleElement",
            "--disable",
            "sortAttrs,mergePaths",
        ]
    )
    assert_SUCCESS(result)
    by_name = {
        name: line
        for line in result.stdout.splitlines()
        for name in PASS_ORDER
        if f" {name} " in line
    }
    assert " on  " in by_name["removeStyleElement"]
    assert " off " in by_name["sortAttrs"]
    assert " off " in by_name["mergePaths"]


@mark_cli
def test_unknown_pass() -> None:
    assert_USAGE_ERROR(run_cli(["passes", "--no-config", "--enable", "bogus"]))

# topmark:header:start
#
#   project      : svgtidy
#   file         : test_version_cmd.py
#   file_relpath : tests/cli/test_version_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for `svgtidy version`."""

from __future__ import annotations

import platform

from svgtidy.constants import SVGTIDY_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_prints_the_package_version() -> None:
    result = run_cli(["version"])
    assert_SUCCESS(result)
    assert result.stdout == f"{SVGTIDY_VERSION}\n"


@mark_cli
def test_verbose_version_adds_the_interpreter() -> None:
    result = run_cli(["-v", "version"])
    assert_SUCCESS(result)
    lines = result.stdout.splitlines()
    assert lines[0] == SVGTIDY_VERSION
    assert lines[1] == f"{platform.python_implementation()} {platform.python_version()}"

# topmark:header:start
#
#   project      : svgtidy
#   file         : version.py
#   file_relpath : src/svgtidy/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy `version` command.

Prints the current svgtidy version as installed in the active Python environment.
"""

from __future__ import annotations

import logging
import platform
from typing import TYPE_CHECKING

import click

from svgtidy.cli.cmd_common import get_effective_verbosity
from svgtidy.constants import SVGTIDY_VERSION

if TYPE_CHECKING:
    from svgtidy.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of svgtidy.",
)
def version_command() -> None:
    """Show the current version of svgtidy.

    With ``-v`` the Python implementation and version are printed as well.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    console.print(SVGTIDY_VERSION)
    if get_effective_verbosity(ctx) <= logging.INFO:
        console.print(f"{platform.python_implementation()} {platform.python_version()}")

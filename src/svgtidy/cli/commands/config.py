# topmark:header:start
#
#   project      : svgtidy
#   file         : config.py
#   file_relpath : src/svgtidy/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy `config` command group.

  * ``svgtidy config dump``: show the effective merged configuration.
  * ``svgtidy config defaults``: show the built-in default configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svgtidy.cli.cmd_common import build_config_common
from svgtidy.cli.options import CONTEXT_SETTINGS, common_config_options
from svgtidy.config.io import nest_toml_under_section
from svgtidy.config.logging import get_logger
from svgtidy.config.model import Config
from svgtidy.constants import PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from svgtidy.cli_shared.console_api import ConsoleLike
    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)


def _emit(config: Config, *, pyproject: bool) -> None:
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    text = config.to_toml()
    if pyproject:
        text = nest_toml_under_section(text, f"tool.{PYPROJECT_TOOL_SECTION}")
    console.print(text, nl=not text.endswith("\n"))


@click.group(
    name="config",
    help="Inspect svgtidy configuration.",
    context_settings=CONTEXT_SETTINGS,
)
def config_command() -> None:
    """Group for configuration-related subcommands."""
    # No-op: behavior is provided by subcommands only.


@config_command.command(
    name="dump",
    help="Print the effective configuration (defaults, config files) as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@common_config_options
@click.option(
    "--pyproject",
    is_flag=True,
    help=f"Nest the output under [tool.{PYPROJECT_TOOL_SECTION}] for pyproject.toml.",
)
def config_dump_command(*, no_config: bool, config_paths: tuple[str, ...], pyproject: bool) -> None:
    """Dump the final merged configuration as TOML."""
    config = build_config_common(no_config=no_config, config_paths=config_paths)
    _emit(config, pyproject=pyproject)


@config_command.command(
    name="defaults",
    help="Print the built-in default configuration as TOML.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--pyproject",
    is_flag=True,
    help=f"Nest the output under [tool.{PYPROJECT_TOOL_SECTION}] for pyproject.toml.",
)
def config_defaults_command(*, pyproject: bool) -> None:
    """Print the built-in defaults; a starting point for ``svgtidy.toml``."""
    _emit(Config(), pyproject=pyproject)

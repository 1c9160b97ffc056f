# topmark:header:start
#
#   project      : svgtidy
#   file         : main.py
#   file_relpath : src/svgtidy/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy Click CLI entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj``.
- Subcommands read the shared console from ``ctx.obj["console"]`` for program
  output; diagnostics go through `logging`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from svgtidy.cli.commands.config import config_command
from svgtidy.cli.commands.optimize import optimize_command
from svgtidy.cli.commands.passes import passes_command
from svgtidy.cli.commands.version import version_command
from svgtidy.cli.console import ClickConsole
from svgtidy.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from svgtidy.config.logging import get_logger, resolve_env_log_level, setup_logging
from svgtidy.pipeline.registry import register_all_passes

if TYPE_CHECKING:
    from svgtidy.cli_shared.console_api import ConsoleLike
    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)

register_all_passes()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    ``SVGTIDY_LOG_LEVEL`` takes precedence for internal logging; otherwise ``-v``
    flags enable logging at the matching level. Without either, only critical
    records are shown.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    level_env = resolve_env_log_level()
    level = level_env if level_env is not None else (level_cli if verbose else None)
    ctx.obj["log_level"] = level
    setup_logging(level=level)

    effective_mode = ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="svgtidy: optimize SVG markup without changing how it renders.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the svgtidy CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'svgtidy optimize INPUT' to optimize a file.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(version_command)

cli.add_command(optimize_command)

cli.add_command(passes_command)

cli.add_command(config_command)

if __name__ == "__main__":
    cli()

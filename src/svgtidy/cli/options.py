# topmark:header:start
#
#   project      : svgtidy
#   file         : options.py
#   file_relpath : src/svgtidy/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Common CLI option utilities for the svgtidy Click commands.

This module centralizes reusable options (verbosity, color, configuration,
optimizer settings) and their resolution logic, so commands and groups can stay
thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from svgtidy.cli.errors import SvgtidyUsageError
from svgtidy.config.logging import LEVEL_NAMES, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from svgtidy.config.logging import SvgtidyLogger

P = ParamSpec("P")
R = TypeVar("R")

logger: SvgtidyLogger = get_logger(__name__)

#: Click context settings shared by every command.
CONTEXT_SETTINGS = {
    "help_option_names": ["-h", "--help"],
}


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the final logging level based on verbose and quiet counts.

    Args:
        verbose_count (int): Number of times the verbose flag (-v) is passed.
        quiet_count (int): Number of times the quiet flag (-q) is passed.

    Returns:
        int: The logging level.

    Raises:
        SvgtidyUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE level, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR level. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise SvgtidyUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:  # -vvv
        return LEVEL_NAMES["TRACE"]
    if verbose_count == 2:  # -vv
        return LEVEL_NAMES["DEBUG"]
    if verbose_count == 1:  # -v
        return LEVEL_NAMES["INFO"]
    if quiet_count >= 1:  # -q
        return LEVEL_NAMES["ERROR"]
    return LEVEL_NAMES["WARNING"]


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``-v/--verbose`` and ``-q/--quiet`` (counted, mutually exclusive)."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output except errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stdout_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected when None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Honors ``--color``/``--no-color`` first, then the ``FORCE_COLOR`` and
        ``NO_COLOR`` environment variables. Defaults to color on a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--color`` (auto, always, never) and ``--no-color``."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply common configuration options to a Click command.

    Adds ``--no-config`` and ``--config``.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered svgtidy.toml / pyproject.toml files (only use defaults).",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_optimizer_options(f: Callable[P, R]) -> Callable[P, R]:
    """Apply the options that override optimizer settings.

    Adds ``--precision/-p``, ``--deg-precision``, ``--enable``, ``--disable``,
    ``--multipass/--single-pass``, ``--pretty/--compact`` and ``--indent``. Every option
    defaults to None so that configuration files keep their say unless a flag is
    given.
    """
    f = click.option(
        "-p",
        "--precision",
        type=click.IntRange(0, 12),
        default=None,
        help="Fractional digits kept for coordinates and lengths.",
    )(f)
    f = click.option(
        "--deg-precision",
        "deg_precision",
        type=click.IntRange(0, 12),
        default=None,
        help="Fractional digits kept for angles.",
    )(f)
    f = click.option(
        "--enable",
        "enable",
        multiple=True,
        metavar="PASSES",
        help="Comma-separated passes to switch on (may be repeated).",
    )(f)
    f = click.option(
        "--disable",
        "disable",
        multiple=True,
        metavar="PASSES",
        help="Comma-separated passes to switch off (may be repeated).",
    )(f)
    f = click.option(
        "--multipass/--single-pass",
        "multipass",
        default=None,
        help="Repeat the passes until the output stops changing (default) or run them once.",
    )(f)
    f = click.option(
        "--pretty/--compact",
        "pretty",
        default=None,
        help="Pretty-print the output (one element per line, indented) or print it compact.",
    )(f)
    f = click.option(
        "--indent",
        "indent",
        type=click.IntRange(0, 16),
        default=None,
        help="Spaces per nesting level with --pretty.",
    )(f)
    return f


def split_names(values: Iterable[str]) -> list[str] | None:
    """Flatten repeated, comma-separated option values into a list of names.

    Returns None when no value was given, so that the option does not override
    the configuration.
    """
    names = [name.strip() for value in values for name in value.split(",") if name.strip()]
    return names or None

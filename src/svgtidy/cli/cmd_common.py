# topmark:header:start
#
#   project      : svgtidy
#   file         : cmd_common.py
#   file_relpath : src/svgtidy/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Helpers shared by svgtidy CLI commands."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from svgtidy.cli.errors import SvgtidyConfigError, SvgtidyUsageError
from svgtidy.config.errors import ConfigError
from svgtidy.config.logging import get_logger
from svgtidy.config.model import Config, MutableConfig
from svgtidy.pipeline.pipelines import resolve_pass_names

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    import click

    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the log level resolved from ``-v``/``-q`` for this invocation."""
    return int(ctx.obj.get("verbosity_level", 0))


def build_config_common(
    *,
    no_config: bool,
    config_paths: Iterable[str],
    overrides: Mapping[str, Any] | None = None,
) -> Config:
    """Build the effective configuration for a command.

    Layers defaults, discovered files (unless ``no_config``), explicit
    ``--config`` files and the command line overrides, then validates the pass
    selection.

    Args:
        no_config (bool): Skip discovery of configuration files.
        config_paths (Iterable[str]): Explicit configuration files, merged in order.
        overrides (Mapping[str, Any] | None): CLI overrides; ``None`` values are ignored.

    Returns:
        Config: The frozen configuration.

    Raises:
        SvgtidyConfigError: If a configuration file or value is invalid.
        SvgtidyUsageError: If a pass name is unknown.
    """
    try:
        draft = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            discover=not no_config,
        )
        if overrides:
            draft = draft.apply_overrides(overrides)
        config = draft.freeze()
    except ConfigError as e:
        raise SvgtidyConfigError(str(e)) from e

    try:
        resolve_pass_names(config.enable, config.disable)
    except ValueError as e:
        raise SvgtidyUsageError(str(e)) from e

    logger.debug("Effective configuration: %s", config)
    return config

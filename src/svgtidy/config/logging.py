# topmark:header:start
#
#   project      : svgtidy
#   file         : logging.py
#   file_relpath : src/svgtidy/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy logging: a TRACE level, colored records and package-scoped setup.

Every module obtains its logger through `get_logger(__name__)`, so all records
live under the ``svgtidy`` logger. `setup_logging` attaches the handler there
and leaves the root logger alone, which keeps an embedding application's
logging configuration untouched.

Levels in use:
    * TRACE: one record per pass application and per dropped node.
    * DEBUG: notable rewrites, fixed-point rounds, configuration sources.
    * INFO: per-file results of a batch.
    * WARNING and above: problems with an input or a configuration file.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "SVGTIDY_LOG_LEVEL"

PACKAGE_LOGGER_NAME: Final[str] = "svgtidy"

#: Level names accepted by ``SVGTIDY_LOG_LEVEL`` (and used by the CLI)
LEVEL_NAMES: Final[Mapping[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


class SvgtidyLogger(logging.Logger):
    """Logger with a `trace` method for the TRACE level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log ``msg % args`` with severity TRACE.

        Args:
            msg (object): The message format.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, extra=extra, stacklevel=2)


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(SvgtidyLogger)


LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT: Final[str] = "[%(levelname)s] [%(name)s:%(lineno)d] %(message)s"

# Scanned from the most severe level down; the first threshold reached wins
_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter that colors each record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, style in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Return the level named by ``SVGTIDY_LOG_LEVEL``, or None if unset or unknown.

    Both level names (``TRACE``, ``debug``, ...) and numbers (``10``) are accepted.
    """
    val = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return LEVEL_NAMES.get(v)


def setup_logging(level: int | None = None) -> None:
    """Attach a colored stderr handler to the ``svgtidy`` logger.

    Calling it again replaces the previous handler. Records go to stderr so that
    markup written to stdout stays clean.

    Args:
        level (int | None): Threshold; when None, ``SVGTIDY_LOG_LEVEL`` is consulted
            and CRITICAL is used if it is unset.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    package_logger.setLevel(level)
    for handler in package_logger.handlers[:]:
        package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT)
    )
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str) -> SvgtidyLogger:
    """Return the `SvgtidyLogger` for ``name`` (normally the caller's ``__name__``)."""
    return cast("SvgtidyLogger", logging.getLogger(name))

# topmark:header:start
#
#   project      : svgtidy
#   file         : errors.py
#   file_relpath : src/svgtidy/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Exceptions for the svgtidy CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from svgtidy.cli_shared.exit_codes import ExitCode


class SvgtidyError(click.ClickException):
    """Base class for all svgtidy CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Notes:
            - Unlike Click's default, this method does not add color.
            - Colorization is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class SvgtidyUsageError(SvgtidyError):
    """Error for command-line invocation errors (invalid flags/args, unknown passes)."""

    exit_code = ExitCode.USAGE_ERROR


class SvgtidyConfigError(SvgtidyError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class SvgtidyFileNotFoundError(SvgtidyError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class SvgtidyPermissionDeniedError(SvgtidyError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class SvgtidyIOError(SvgtidyError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class SvgtidyParseError(SvgtidyError):
    """Error for input that is not well-formed markup or not valid UTF-8."""

    exit_code = ExitCode.PARSE_ERROR


class SvgtidyPipelineError(SvgtidyError):
    """Error for internal failures while running the passes."""

    exit_code = ExitCode.PIPELINE_ERROR


ERRORS_BY_EXIT_CODE: dict[ExitCode, type[SvgtidyError]] = {
    ExitCode.USAGE_ERROR: SvgtidyUsageError,
    ExitCode.CONFIG_ERROR: SvgtidyConfigError,
    ExitCode.FILE_NOT_FOUND: SvgtidyFileNotFoundError,
    ExitCode.PERMISSION_DENIED: SvgtidyPermissionDeniedError,
    ExitCode.IO_ERROR: SvgtidyIOError,
    ExitCode.PARSE_ERROR: SvgtidyParseError,
    ExitCode.PIPELINE_ERROR: SvgtidyPipelineError,
}


def error_for(code: ExitCode, message: str) -> SvgtidyError:
    """Return the CLI exception matching an engine exit code."""
    return ERRORS_BY_EXIT_CODE.get(code, SvgtidyError)(message)

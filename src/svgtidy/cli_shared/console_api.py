# topmark:header:start
#
#   project      : svgtidy
#   file         : console_api.py
#   file_relpath : src/svgtidy/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Output surface shared by the CLI commands.

Commands never write to the standard streams directly. Optimized markup,
reports and listings go through a `ConsoleLike`; diagnostics go through logging.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command may do with its console."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write a line of program output to stdout."""
        ...

    def markup(self, text: str) -> None:
        """Write optimized markup to stdout exactly as given."""
        ...

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a warning to stderr."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write an error to stderr."""
        ...

    def styled(self, text: str, **style: object) -> str:
        """Return ``text`` styled for the terminal (unchanged without color)."""
        ...

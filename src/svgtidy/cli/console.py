# topmark:header:start
#
#   project      : svgtidy
#   file         : console.py
#   file_relpath : src/svgtidy/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Click-backed console for user-facing output.

Markup produced by ``svgtidy optimize`` must reach stdout byte for byte, so it
has its own method that never adds a newline or styling. Everything else is
line-oriented text that may be colored.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from svgtidy.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Keep ANSI styling in the output.
        out (TextIO | None): Program output stream; `sys.stdout` when None.
        err (TextIO | None): Diagnostics stream; `sys.stderr` when None.
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def markup(self, text: str) -> None:
        click.echo(text, nl=False, file=self.out, color=False)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(text, nl=nl, file=self.err, color=self.enable_color, fg="bright_red")

    def styled(self, text: str, **style: Any) -> str:
        if not self.enable_color:
            return text
        return click.style(text, **style)

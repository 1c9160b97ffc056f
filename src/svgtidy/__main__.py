# topmark:header:start
#
#   project      : svgtidy
#   file         : __main__.py
#   file_relpath : src/svgtidy/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Module entry point for running svgtidy via ``python -m svgtidy``.

Equivalent to running the ``svgtidy`` console script; it delegates to
`svgtidy.cli.main.cli`.

Examples:
    Optimize a file in place::

        python -m svgtidy optimize icon.svg -o icon.svg
"""

from __future__ import annotations

from svgtidy.cli.main import cli

if __name__ == "__main__":
    cli()

# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Click-based command line interface for svgtidy.

The entry point is `svgtidy.cli.main.cli`; it is not imported here so that
importing ``svgtidy.cli`` stays free of side effects.
"""

from __future__ import annotations

__all__: list[str] = []

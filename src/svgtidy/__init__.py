# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy package.

svgtidy is an optimizer for SVG markup. It parses a document into a small
in-memory tree, runs an ordered list of rewriting passes that preserve the
rendering, and prints the result back as compact text. It exposes both a CLI
and a small typed API (see `svgtidy.api`).
"""

from __future__ import annotations

from svgtidy.api import (
    Config,
    ParseError,
    compose,
    optimize,
    optimize_document,
    parse,
    parse_path_data,
    parse_transform,
    print_document,
    serialize_path_data,
    serialize_transform,
)

__all__: list[str] = [
    "Config",
    "ParseError",
    "compose",
    "optimize",
    "optimize_document",
    "parse",
    "parse_path_data",
    "parse_transform",
    "print_document",
    "serialize_path_data",
    "serialize_transform",
]

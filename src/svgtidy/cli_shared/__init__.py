# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Helpers shared by the CLI and the engine layer (no Click imports)."""

# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy CLI subcommands."""

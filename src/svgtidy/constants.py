# topmark:header:start
#
#   project      : svgtidy
#   file         : constants.py
#   file_relpath : src/svgtidy/constants.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""svgtidy Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

SVGTIDY_VERSION: str = get_version("svgtidy")

# Config file discovery
SVGTIDY_TOML_CONFIG_NAME: str = "svgtidy.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "svgtidy"

# Numeric defaults shared by the configuration layer and the configurable passes
DEFAULT_PRECISION: int = 3
DEFAULT_DEG_PRECISION: int = 3
DEFAULT_INDENT: int = 2

SVG_FILE_SUFFIX: str = ".svg"


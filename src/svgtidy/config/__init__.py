# topmark:header:start
#
#   project      : svgtidy
#   file         : __init__.py
#   file_relpath : src/svgtidy/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Configuration for svgtidy.

Public surface:
    - `Config` (immutable) and `MutableConfig` (builder with freeze/thaw);
    - `ConfigError` for invalid values or files.

Logging helpers live in `svgtidy.config.logging`.
"""

from __future__ import annotations

from svgtidy.config.errors import ConfigError
from svgtidy.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "ConfigError",
    "MutableConfig",
]

# topmark:header:start
#
#   project      : svgtidy
#   file         : errors.py
#   file_relpath : src/svgtidy/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Configuration errors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class ConfigError(ValueError):
    """Raised for invalid configuration values or unreadable configuration files.

    Attributes:
        source (Path | str | None): The file (or other source label) the bad value came from.
    """

    def __init__(self, message: str, source: Path | str | None = None) -> None:
        self.source = source
        super().__init__(f"{source}: {message}" if source is not None else message)

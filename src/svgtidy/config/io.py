# topmark:header:start
#
#   project      : svgtidy
#   file         : io.py
#   file_relpath : src/svgtidy/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""TOML input/output helpers for svgtidy configuration.

Reading goes through ``toml`` (plain dicts). Writing a document meant for
humans (``svgtidy config dump``) goes through ``tomlkit`` so that comments and
section nesting survive.

Typed getters raise `ConfigError` when a key is present with a value of the wrong
type; a missing key yields ``None`` so that callers can tell "unset" from "set".
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

import toml
import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError
from tomlkit.items import Table

from svgtidy.config.errors import ConfigError
from svgtidy.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)

TomlTable = dict[str, Any]


__all__: list[str] = [
    "TomlTable",
    "is_toml_table",
    "get_table_value",
    "get_bool_value_or_none",
    "get_int_value_or_none",
    "get_string_list_value_or_none",
    "load_toml_dict",
    "to_toml",
    "nest_toml_under_section",
]


def is_toml_table(val: Any) -> TypeGuard[TomlTable]:
    """Return True if ``val`` is a TOML table (a ``dict``)."""
    return isinstance(val, dict)


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table, returning an empty dict when missing or not a table."""
    value: Any | None = table.get(key)
    return value if is_toml_table(value) else {}


def get_bool_value_or_none(
    table: TomlTable, key: str, source: Path | str | None = None
) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (Path | str | None): Source label used in error messages.

    Returns:
        bool | None: The value, or ``None`` when the key is absent.

    Raises:
        ConfigError: If the value is present but not a boolean.
    """
    value: Any | None = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    raise ConfigError(f"'{key}' must be a boolean, got {value!r}", source)


def get_int_value_or_none(
    table: TomlTable,
    key: str,
    source: Path | str | None = None,
    *,
    minimum: int = 0,
    maximum: int | None = None,
) -> int | None:
    """Extract an optional bounded integer value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        source (Path | str | None): Source label used in error messages.
        minimum (int): Smallest accepted value.
        maximum (int | None): Largest accepted value, if bounded.

    Returns:
        int | None: The value, or ``None`` when the key is absent.

    Raises:
        ConfigError: If the value is not an integer or out of range.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"'{key}' must be an integer, got {value!r}", source)
    if value < minimum or (maximum is not None and value > maximum):
        bounds = f">= {minimum}" if maximum is None else f"between {minimum} and {maximum}"
        raise ConfigError(f"'{key}' must be {bounds}, got {value}", source)
    return int(value)


def get_string_list_value_or_none(
    table: TomlTable, key: str, source: Path | str | None = None
) -> list[str] | None:
    """Extract an optional list of strings.

    A single string is accepted and split on commas, so ``enable = "a,b"`` and
    ``enable = ["a", "b"]`` are equivalent.

    Raises:
        ConfigError: If the value is neither a string nor a list of strings.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [item.strip() for item in value.split(",") if item.strip()]
    if isinstance(value, list) and all(isinstance(item, str) for item in value):
        return [str(item).strip() for item in value if str(item).strip()]
    raise ConfigError(f"'{key}' must be a list of strings, got {value!r}", source)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``svgtidy.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        return toml.load(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"cannot read configuration file: {e}", path) from e
    except toml.TomlDecodeError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"invalid TOML: {e}", path) from e


def to_toml(toml_dict: TomlTable, *, header: str | None = None) -> str:
    """Render a TOML mapping, optionally preceded by a comment block.

    Args:
        toml_dict (TomlTable): TOML mapping to render.
        header (str | None): Text emitted as leading ``#`` comment lines.

    Returns:
        str: The rendered TOML document.
    """
    doc: tomlkit.TOMLDocument = tomlkit.document()
    if header:
        for line in header.splitlines():
            doc.add(tomlkit.comment(line))
        doc.add(tomlkit.nl())
    for key, value in toml_dict.items():
        doc.add(key, value)
    return tomlkit.dumps(doc)


def nest_toml_under_section(toml_doc: str, section_keys: str) -> str:
    """Return a new TOML document nested under a dotted section path.

    ``nest_toml_under_section("a = 1\\n", "tool.svgtidy")`` yields a document
    equivalent to::

        [tool.svgtidy]
        a = 1

    Leading comments of the original document stay at the top of the new one.

    Args:
        toml_doc (str): Original TOML document to nest.
        section_keys (str): Dotted section path such as ``"tool.svgtidy"``.

    Returns:
        str: The nested document.

    Raises:
        ValueError: If ``section_keys`` has no non-empty component.
        RuntimeError: If the TOML document cannot be parsed.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(toml_doc)
    except TomlkitParseError as exc:
        raise RuntimeError(f"Error parsing TOML document: {exc}") from exc

    keys: list[str] = [k for k in section_keys.split(".") if k]
    if not keys:
        raise ValueError("section_keys must contain at least one non-empty component")

    new_doc: tomlkit.TOMLDocument = tomlkit.document()
    # Keep the preamble (comments before the first key) at the top
    for key, item in doc.body:
        if key is not None:
            break
        new_doc.body.append((key, item))

    node: Table = tomlkit.table()
    for key, value in doc.items():
        node.add(key, value)
    # Wrap from the innermost section outwards
    for key in reversed(keys[1:]):
        outer: Table = tomlkit.table(is_super_table=True)
        outer.add(key, node)
        node = outer
    new_doc.add(keys[0], node)
    return tomlkit.dumps(new_doc)

# topmark:header:start
#
#   project      : svgtidy
#   file         : model.py
#   file_relpath : src/svgtidy/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Configuration model and merge policy.

This module defines:
    - `Config`: an immutable snapshot handed to pass constructors.
    - `MutableConfig`: a mutable builder used during discovery and merging; it
      can be frozen into `Config` and thawed back for edits.

Layering (lowest to highest precedence):
    1. built-in defaults (`MutableConfig.from_defaults`);
    2. discovered files, walking up from the working directory, root-most first;
       within one directory ``pyproject.toml`` (``[tool.svgtidy]``) comes before
       ``svgtidy.toml``;
    3. explicit ``--config`` files, in the order given;
    4. CLI overrides (`MutableConfig.apply_overrides`).

Unset values are ``None`` in `MutableConfig`; `MutableConfig.freeze` fills in the
defaults. Pass selection merges per name: a later ``enable`` cancels an earlier
``disable`` of the same pass and the other way around.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from svgtidy.config.errors import ConfigError
from svgtidy.config.io import (
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_list_value_or_none,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from svgtidy.config.logging import get_logger
from svgtidy.constants import (
    DEFAULT_DEG_PRECISION,
    DEFAULT_INDENT,
    DEFAULT_PRECISION,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
    SVGTIDY_TOML_CONFIG_NAME,
)

if TYPE_CHECKING:
    from svgtidy.config.io import TomlTable
    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)

MAX_PRECISION: int = 12
MAX_INDENT: int = 16

_INT_KEYS: tuple[str, ...] = ("precision", "deg_precision", "indent")
_BOOL_KEYS: tuple[str, ...] = (
    "remove_px",
    "convert_to_px",
    "remove_leading_zero",
    "convert_arcs",
    "pretty",
    "multipass",
)
_LIST_KEYS: tuple[str, ...] = ("enable", "disable")
KNOWN_KEYS: frozenset[str] = frozenset(_INT_KEYS + _BOOL_KEYS + _LIST_KEYS + ("root",))


def _merge_names(base: Iterable[str], added: Iterable[str]) -> list[str]:
    merged = list(base)
    for name in added:
        if name not in merged:
            merged.append(name)
    return merged


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration.

    Attributes:
        precision (int): Fractional digits kept for coordinates and lengths.
        deg_precision (int): Fractional digits kept for angles.
        remove_px (bool): Drop the ``px`` unit where it is the default.
        convert_to_px (bool): Convert absolute units to user units when shorter.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.
        convert_arcs (bool): Let shape conversion turn circles and ellipses into arcs.
        multipass (bool): Repeat the pass list until the output stops changing.
        pretty (bool): Pretty-print the output.
        indent (int): Spaces per nesting level in pretty output.
        enable (tuple[str, ...]): Passes switched on in addition to the defaults.
        disable (tuple[str, ...]): Passes switched off.
        config_files (tuple[Path | str, ...]): Configuration sources that were merged.
    """

    precision: int = DEFAULT_PRECISION
    deg_precision: int = DEFAULT_DEG_PRECISION
    remove_px: bool = True
    convert_to_px: bool = True
    remove_leading_zero: bool = True
    convert_arcs: bool = False
    multipass: bool = True
    pretty: bool = False
    indent: int = DEFAULT_INDENT
    enable: tuple[str, ...] = ()
    disable: tuple[str, ...] = ()
    config_files: tuple[Path | str, ...] = ()

    def to_toml_dict(self) -> TomlTable:
        """Return the configuration as a TOML-ready mapping (provenance excluded)."""
        return {
            "precision": self.precision,
            "deg_precision": self.deg_precision,
            "remove_px": self.remove_px,
            "convert_to_px": self.convert_to_px,
            "remove_leading_zero": self.remove_leading_zero,
            "convert_arcs": self.convert_arcs,
            "multipass": self.multipass,
            "pretty": self.pretty,
            "indent": self.indent,
            "enable": list(self.enable),
            "disable": list(self.disable),
        }

    def to_toml(self) -> str:
        """Render the effective configuration as a TOML document."""
        if self.config_files:
            sources = "\n".join(f"  {src}" for src in self.config_files)
            header = f"svgtidy effective configuration\nmerged from:\n{sources}"
        else:
            header = "svgtidy effective configuration (built-in defaults)"
        return to_toml(self.to_toml_dict(), header=header)

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            precision=self.precision,
            deg_precision=self.deg_precision,
            remove_px=self.remove_px,
            convert_to_px=self.convert_to_px,
            remove_leading_zero=self.remove_leading_zero,
            convert_arcs=self.convert_arcs,
            multipass=self.multipass,
            pretty=self.pretty,
            indent=self.indent,
            enable=list(self.enable),
            disable=list(self.disable),
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    Every scalar field is tri-state: ``None`` means "not set by this layer".
    """

    precision: int | None = None
    deg_precision: int | None = None
    remove_px: bool | None = None
    convert_to_px: bool | None = None
    remove_leading_zero: bool | None = None
    convert_arcs: bool | None = None
    multipass: bool | None = None
    pretty: bool | None = None
    indent: int | None = None
    enable: list[str] = field(default_factory=lambda: [])
    disable: list[str] = field(default_factory=lambda: [])
    config_files: list[Path | str] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Freeze this builder into an immutable `Config`, filling in defaults."""
        defaults = Config()
        return Config(
            precision=defaults.precision if self.precision is None else self.precision,
            deg_precision=(
                defaults.deg_precision if self.deg_precision is None else self.deg_precision
            ),
            remove_px=defaults.remove_px if self.remove_px is None else self.remove_px,
            convert_to_px=(
                defaults.convert_to_px if self.convert_to_px is None else self.convert_to_px
            ),
            remove_leading_zero=(
                defaults.remove_leading_zero
                if self.remove_leading_zero is None
                else self.remove_leading_zero
            ),
            convert_arcs=defaults.convert_arcs if self.convert_arcs is None else self.convert_arcs,
            multipass=defaults.multipass if self.multipass is None else self.multipass,
            pretty=defaults.pretty if self.pretty is None else self.pretty,
            indent=defaults.indent if self.indent is None else self.indent,
            enable=tuple(self.enable),
            disable=tuple(self.disable),
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return Config().thaw()

    # ------------------------------ Loading -------------------------------
    @classmethod
    def from_toml_dict(
        cls, table: TomlTable, *, source: Path | str | None = None
    ) -> MutableConfig:
        """Build a layer from a parsed TOML table.

        Args:
            table (TomlTable): Top-level keys of ``svgtidy.toml`` or the content of
                ``[tool.svgtidy]``.
            source (Path | str | None): Where the table came from (error messages, provenance).

        Returns:
            MutableConfig: The layer.

        Raises:
            ConfigError: On unknown keys or values of the wrong type.
        """
        unknown = sorted(set(table) - KNOWN_KEYS)
        if unknown:
            raise ConfigError(f"unknown configuration key(s): {', '.join(unknown)}", source)

        draft = cls()
        draft.precision = get_int_value_or_none(table, "precision", source, maximum=MAX_PRECISION)
        draft.deg_precision = get_int_value_or_none(
            table, "deg_precision", source, maximum=MAX_PRECISION
        )
        draft.indent = get_int_value_or_none(table, "indent", source, maximum=MAX_INDENT)
        for key in _BOOL_KEYS:
            setattr(draft, key, get_bool_value_or_none(table, key, source))
        draft.enable = get_string_list_value_or_none(table, "enable", source) or []
        draft.disable = get_string_list_value_or_none(table, "disable", source) or []
        if source is not None:
            draft.config_files = [source]
        return draft

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load one configuration file.

        For ``pyproject.toml`` only the ``[tool.svgtidy]`` table is read; a
        ``pyproject.toml`` without it yields None.

        Raises:
            ConfigError: If the file is unreadable, not TOML, or holds invalid values.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        data: TomlTable = load_toml_dict(path)
        if path.name == PYPROJECT_TOML_NAME:
            if PYPROJECT_TOOL_SECTION not in get_table_value(data, "tool"):
                logger.debug("No [tool.%s] section in %s", PYPROJECT_TOOL_SECTION, path)
                return None
            data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
        return cls.from_toml_dict(data, source=path)

    @classmethod
    def discover_config_files(cls, start: Path) -> list[Path]:
        """Return config files found by walking upward from ``start``.

        Files are returned root-most first. Within one directory ``pyproject.toml``
        precedes ``svgtidy.toml`` so that the latter wins on merge. A file that sets
        ``root = true`` stops the walk after its directory.

        Args:
            start (Path): Directory (or file) where discovery starts.

        Returns:
            list[Path]: Discovered files in merge order.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            stop_here = False
            entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, SVGTIDY_TOML_CONFIG_NAME):
                candidate = cur / name
                if not candidate.is_file():
                    continue
                try:
                    data: TomlTable = load_toml_dict(candidate)
                except ConfigError as e:
                    # Reported when the file is loaded for real
                    logger.debug("Ignoring unreadable config during discovery: %s", e)
                    entries.append(candidate)
                    continue
                if name == PYPROJECT_TOML_NAME:
                    data = get_table_value(get_table_value(data, "tool"), PYPROJECT_TOOL_SECTION)
                    if not data:
                        continue
                entries.append(candidate)
                logger.debug("Discovered config file: %s", candidate)
                if data.get("root") is True:
                    stop_here = True

            if entries:
                per_dir.append(entries)
            parent = cur.parent
            if parent == cur or stop_here:
                if stop_here:
                    logger.debug("Stopping upward config discovery at %s due to root=true", cur)
                break
            cur = parent

        ordered: list[Path] = []
        for entries in reversed(per_dir):
            ordered.extend(entries)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        discover: bool = True,
    ) -> MutableConfig:
        """Build the layered configuration (defaults, discovered files, explicit files).

        Args:
            start (Path | None): Discovery anchor; defaults to the current directory.
            extra_config_files (Iterable[Path]): Explicit files merged after discovery.
            discover (bool): Whether to walk up from ``start`` looking for config files.

        Returns:
            MutableConfig: The merged draft (CLI overrides not yet applied).
        """
        draft = cls.from_defaults()
        paths: list[Path] = []
        if discover:
            paths.extend(cls.discover_config_files(start or Path.cwd()))
        paths.extend(Path(p) for p in extra_config_files)
        for path in paths:
            layer = cls.from_toml_file(path)
            if layer is not None:
                draft = draft.merge_with(layer)
        return draft

    # ------------------------------- Merging -------------------------------
    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new draft where values set in ``other`` override this draft."""

        def pick(name: str) -> Any:
            value = getattr(other, name)
            return getattr(self, name) if value is None else value

        enable = [n for n in self.enable if n not in other.disable]
        disable = [n for n in self.disable if n not in other.enable]
        return MutableConfig(
            precision=pick("precision"),
            deg_precision=pick("deg_precision"),
            remove_px=pick("remove_px"),
            convert_to_px=pick("convert_to_px"),
            remove_leading_zero=pick("remove_leading_zero"),
            convert_arcs=pick("convert_arcs"),
            multipass=pick("multipass"),
            pretty=pick("pretty"),
            indent=pick("indent"),
            enable=_merge_names(enable, other.enable),
            disable=_merge_names(disable, other.disable),
            config_files=self.config_files + other.config_files,
        )

    def apply_overrides(self, overrides: Mapping[str, Any]) -> MutableConfig:
        """Apply CLI-style overrides; ``None`` values are ignored.

        Args:
            overrides (Mapping[str, Any]): Keys as in the TOML file.

        Returns:
            MutableConfig: A new merged draft.

        Raises:
            ConfigError: On unknown keys or invalid values.
        """
        table = {k: v for k, v in overrides.items() if v is not None}
        layer = MutableConfig.from_toml_dict(table, source="command line")
        layer.config_files = []
        return self.merge_with(layer)

# topmark:header:start
#
#   project      : svgtidy
#   file         : test_config_io.py
#   file_relpath : tests/config/test_config_io.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the TOML helpers and the configuration dump."""

from __future__ import annotations

from pathlib import Path

import pytest
import toml

from svgtidy.config.errors import ConfigError
from svgtidy.config.io import (
    get_string_list_value_or_none,
    get_table_value,
    load_toml_dict,
    nest_toml_under_section,
    to_toml,
)
from svgtidy.config.model import Config, MutableConfig


def test_get_table_value_tolerates_missing_and_scalars() -> None:
    assert get_table_value({"tool": {"a": 1}}, "tool") == {"a": 1}
    assert get_table_value({"tool": 3}, "tool") == {}
    assert get_table_value({}, "tool") == {}


def test_string_lists() -> None:
    assert get_string_list_value_or_none({"k": "a, b,,c"}, "k") == ["a", "b", "c"]
    assert get_string_list_value_or_none({"k": [" a ", ""]}, "k") == ["a"]
    assert get_string_list_value_or_none({}, "k") is None


def test_load_toml_dict_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="cannot read"):
        load_toml_dict(tmp_path / "missing.toml")
    broken = tmp_path / "broken.toml"
    broken.write_text("a = \n", encoding="utf-8")
    with pytest.raises(ConfigError, match="invalid TOML"):
        load_toml_dict(broken)


def test_to_toml_writes_header_comments() -> None:
    text = to_toml({"precision": 3}, header="line one\nline two")
    assert text.startswith("# line one\n# line two\n")
    assert toml.loads(text) == {"precision": 3}


def test_config_dump_round_trips(tmp_path: Path) -> None:
    config = Config(precision=2, pretty=True, disable=("sortAttrs",))
    text = config.to_toml()
    assert text.startswith("# svgtidy effective configuration (built-in defaults)")
    path = tmp_path / "svgtidy.toml"
    path.write_text(text, encoding="utf-8")
    layer = MutableConfig.from_toml_file(path)
    assert layer is not None
    reloaded = layer.freeze()
    assert reloaded.precision == 2
    assert reloaded.pretty
    assert reloaded.disable == ("sortAttrs",)


def test_config_dump_lists_sources() -> None:
    text = Config(config_files=(Path("a/svgtidy.toml"),)).to_toml()
    assert "merged from:" in text
    assert str(Path("a/svgtidy.toml")) in text


def test_nest_under_section() -> None:
    nested = nest_toml_under_section("# head\nprecision = 3\n", "tool.svgtidy")
    assert nested.startswith("# head")
    assert toml.loads(nested) == {"tool": {"svgtidy": {"precision": 3}}}


def test_nest_under_empty_section_is_rejected() -> None:
    with pytest.raises(ValueError):
        nest_toml_under_section("a = 1\n", ".")

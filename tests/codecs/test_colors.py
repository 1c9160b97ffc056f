# topmark:header:start
#
#   project      : svgtidy
#   file         : test_colors.py
#   file_relpath : tests/codecs/test_colors.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for color parsing and shortening."""

from __future__ import annotations

from svgtidy.codecs.colors import NAMED_COLORS, minify_color, parse_color, short_hex
from tests.conftest import parametrize


@parametrize(
    "value,expected",
    [
        ("#F00", (255, 0, 0)),
        ("#00ff80", (0, 255, 128)),
        ("rgb(255,0,0)", (255, 0, 0)),
        ("RGB( 0 , 128 , 255 )", (0, 128, 255)),
        ("rgb(100%,0%,50%)", (255, 0, 128)),
        ("rgb(300,-5,0)", (255, 0, 0)),
        ("Red", (255, 0, 0)),
        ("rebeccapurple", (102, 51, 153)),
    ],
)
def test_parse_color(value: str, expected: tuple[int, int, int]) -> None:
    assert parse_color(value) == expected


@parametrize(
    "value",
    [
        "none",
        "currentColor",
        "url(#g)",
        "#ff",
        "rgb(100%,0,0)",
        "notacolor",
        "rgba(0,0,0,.5)",
        "rgb(" + "9" * 400 + ",0,0)",
    ],
)
def test_parse_color_rejects_non_colors(value: str) -> None:
    assert parse_color(value) is None


def test_short_hex() -> None:
    assert short_hex((255, 0, 0)) == "#f00"
    assert short_hex((170, 187, 204)) == "#abc"
    assert short_hex((170, 187, 205)) == "#aabbcd"


@parametrize(
    "value,expected",
    [
        ("rgb(255,0,0)", "#f00"),
        ("#AABBCC", "#abc"),
        ("#ABC", "#abc"),
        ("#aabbcd", "#aabbcd"),
        ("white", "#fff"),
        ("red", "red"),
        ("#ff0000", "#f00"),
        ("none", "none"),
        ("url(#a)", "url(#a)"),
    ],
)
def test_minify_color(value: str, expected: str) -> None:
    assert minify_color(value) == expected


def test_named_color_table_is_lowercase_hex() -> None:
    assert len(NAMED_COLORS) >= 140
    for name, value in NAMED_COLORS.items():
        assert name == name.lower()
        assert parse_color(value) is not None

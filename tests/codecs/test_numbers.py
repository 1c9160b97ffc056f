# topmark:header:start
#
#   project      : svgtidy
#   file         : test_numbers.py
#   file_relpath : tests/codecs/test_numbers.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for number and length parsing and formatting."""

from __future__ import annotations

from svgtidy.codecs.numbers import (
    format_length,
    format_number,
    join_numbers,
    parse_length,
    parse_number,
    parse_number_list,
    round_value,
)
from tests.conftest import parametrize


@parametrize(
    "value,precision,expected",
    [
        (0.5, 3, ".5"),
        (-0.5, 3, "-.5"),
        (10.0, 3, "10"),
        (1.23456, 3, "1.235"),
        (1.0005, 3, "1.001"),
        (-1.0005, 3, "-1.001"),
        (2.5, 0, "3"),
        (-2.5, 0, "-3"),
        (-0.0001, 3, "0"),
        (1e-7, None, ".0000001"),
        (1e21, None, "1000000000000000000000"),
    ],
)
def test_format_number(value: float, precision: int | None, expected: str) -> None:
    assert format_number(value, precision) == expected


def test_format_number_keeps_leading_zero_on_request() -> None:
    assert format_number(0.5, 3, remove_leading_zero=False) == "0.5"
    assert format_number(-0.25, 3, remove_leading_zero=False) == "-0.25"


def test_round_value_is_half_away_from_zero() -> None:
    assert round_value(0.125, 2) == 0.13
    assert round_value(-0.125, 2) == -0.13
    assert round_value(1.5, None) == 1.5
    assert str(round_value(-0.0001, 2)) == "0.0"


@parametrize(
    "text,expected",
    [
        ("10", 10.0),
        (" -1.5e2 ", -150.0),
        (".5", 0.5),
        ("+3", 3.0),
        ("10px", None),
        ("", None),
        ("abc", None),
    ],
)
def test_parse_number(text: str, expected: float | None) -> None:
    assert parse_number(text) == expected


@parametrize(
    "text,expected",
    [
        ("10", (10.0, "")),
        ("1.5mm", (1.5, "mm")),
        ("50%", (50.0, "%")),
        ("12px", (12.0, "px")),
        ("auto", None),
    ],
)
def test_parse_length(text: str, expected: tuple[float, str] | None) -> None:
    assert parse_length(text) == expected


def test_parse_number_list_separators() -> None:
    assert parse_number_list("0 0 100 50") == [0.0, 0.0, 100.0, 50.0]
    assert parse_number_list("1,2 , 3") == [1.0, 2.0, 3.0]
    assert parse_number_list("10-5.5.5") == [10.0, -5.5, 0.5]
    assert parse_number_list("") == []
    assert parse_number_list("1,") is None
    assert parse_number_list("1,,2") is None
    assert parse_number_list("1 a") is None
    assert parse_number_list("0 1e999") is None
    assert parse_number_list("-1e400,0") is None


def test_join_numbers_drops_redundant_spaces() -> None:
    assert join_numbers(["10", "-5", ".5", "3"]) == "10-5 .5 3"
    assert join_numbers(["1.5", ".5"]) == "1.5.5"


@parametrize(
    "value,unit,expected",
    [
        (10.0, "px", "10"),
        (1.0, "in", "96"),
        (1.0, "pt", "1pt"),
        (0.5, "%", ".5%"),
        (2.0, "em", "2em"),
    ],
)
def test_format_length(value: float, unit: str, expected: str) -> None:
    assert format_length(value, unit, 3) == expected


def test_format_length_options() -> None:
    assert format_length(10.0, "px", 3, remove_px=False) == "10px"
    assert format_length(1.0, "in", 3, convert_to_px=False) == "1in"
    assert format_length(25.4, "mm", 3, remove_px=False) == "96px"
    assert format_length(1e307, "in", 3) == format_number(1e307, 3) + "in"

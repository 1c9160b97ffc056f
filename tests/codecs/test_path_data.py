# topmark:header:start
#
#   project      : svgtidy
#   file         : test_path_data.py
#   file_relpath : tests/codecs/test_path_data.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the path data codec."""

from __future__ import annotations

from svgtidy.codecs.path_data import (
    PathSegment,
    bounding_box,
    boxes_intersect,
    optimize_path,
    parse_path_data,
    serialize_path_data,
    to_absolute,
)
from tests.conftest import parametrize


def test_parse_absolute_and_relative_commands() -> None:
    segments = parse_path_data("M10 20L30 40 h5 z")
    assert segments == [
        PathSegment("M", False, (10.0, 20.0)),
        PathSegment("L", False, (30.0, 40.0)),
        PathSegment("H", True, (5.0,)),
        PathSegment("Z", True, ()),
    ]


def test_repeated_moveto_pairs_are_linetos() -> None:
    segments = parse_path_data("m1 2 3 4 5 6")
    assert segments is not None
    assert [seg.letter for seg in segments] == ["m", "l", "l"]


def test_numbers_may_run_together() -> None:
    segments = parse_path_data("M-1-2.5.5.5L1e1,2")
    assert segments == [
        PathSegment("M", False, (-1.0, -2.5)),
        PathSegment("L", False, (0.5, 0.5)),
        PathSegment("L", False, (10.0, 2.0)),
    ]


def test_arc_flags_are_single_characters() -> None:
    segments = parse_path_data("M0 0a5 5 0 1110 10")
    assert segments == [
        PathSegment("M", False, (0.0, 0.0)),
        PathSegment("A", True, (5.0, 5.0, 0.0, 1.0, 1.0, 10.0, 10.0)),
    ]


@parametrize("text", ["", "   ", "\n"])
def test_blank_path_is_empty(text: str) -> None:
    assert parse_path_data(text) == []


@parametrize(
    "text",
    [
        "L1 2",  # must start with a moveto
        "M1 2 L",  # missing arguments
        "M1,2,",  # dangling comma
        "M1 2 X3",  # unknown command
        "M0 0 A5 5 0 2 0 1 1",  # arc flag out of range
        "M1e999 0L1 1",  # coordinate overflows
        "M1e308 0l1e308 0",  # absolute position overflows
    ],
)
def test_invalid_path_data(text: str) -> None:
    assert parse_path_data(text) is None


def test_serialize_omits_repeated_letters_and_spaces() -> None:
    segments = [
        PathSegment("M", False, (10.0, 20.0)),
        PathSegment("L", False, (30.0, 40.0)),
        PathSegment("L", False, (50.0, 60.0)),
        PathSegment("L", True, (-1.0, -2.0)),
        PathSegment("L", True, (0.5, 0.25)),
    ]
    assert serialize_path_data(segments) == "M10 20 30 40 50 60l-1-2 .5.25"


def test_serialize_precision_and_leading_zero() -> None:
    segments = [PathSegment("M", False, (0.12345, -0.5))]
    assert serialize_path_data(segments, precision=2) == "M.12-.5"
    assert serialize_path_data(segments, precision=2, remove_leading_zero=False) == "M0.12-0.5"


def test_serialize_empty() -> None:
    assert serialize_path_data([]) == ""


def test_to_absolute() -> None:
    segments = parse_path_data("m10 10 l5 5 h5 v-10 z m1 1")
    assert segments is not None
    absolute = to_absolute(segments)
    assert [seg.letter for seg in absolute] == ["M", "L", "H", "V", "Z", "M"]
    assert absolute[1].args == (15.0, 15.0)
    assert absolute[2].args == (20.0,)
    assert absolute[3].args == (5.0,)
    # A moveto after closepath is relative to the subpath start
    assert absolute[5].args == (11.0, 11.0)


def test_optimize_path_picks_shorter_forms() -> None:
    segments = parse_path_data("M 10 20 L 110 20 L 110 70 L 10 70 Z")
    assert segments is not None
    optimized = optimize_path(segments, precision=3)
    assert serialize_path_data(optimized, precision=3) == "M10 20h100v50H10z"


def test_optimize_path_rounds_absolute_points() -> None:
    segments = parse_path_data("M0.3333 0.6666 L10.0004 0.6666")
    assert segments is not None
    optimized = optimize_path(segments, precision=3)
    assert serialize_path_data(optimized, precision=3) == "M.333.667H10"


def test_optimize_path_keeps_absolute_form_when_delta_overflows() -> None:
    segments = parse_path_data("M1e308 1L-1e308 1")
    assert segments is not None
    optimized = optimize_path(segments, precision=3)
    assert optimized[1] == PathSegment("H", False, (-1e308,))


def test_bounding_box_and_intersection() -> None:
    first = parse_path_data("M0 0L10 5")
    second = parse_path_data("M10 5h10v10")
    third = parse_path_data("M30 30h1")
    assert first is not None and second is not None and third is not None
    box1, box2, box3 = bounding_box(first), bounding_box(second), bounding_box(third)
    assert box1 == (0.0, 0.0, 10.0, 5.0)
    assert box2 == (10.0, 5.0, 20.0, 15.0)
    assert box1 is not None and box2 is not None and box3 is not None
    assert boxes_intersect(box1, box2)  # touching counts
    assert not boxes_intersect(box1, box3)
    assert bounding_box([]) is None

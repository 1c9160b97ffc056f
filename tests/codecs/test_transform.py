# topmark:header:start
#
#   project      : svgtidy
#   file         : test_transform.py
#   file_relpath : tests/codecs/test_transform.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Tests for the transform list codec and matrix algebra."""

from __future__ import annotations

import math

import pytest

from svgtidy.codecs.transform import (
    Matrix,
    TransformFunction,
    compose,
    decompose,
    minify_transform,
    parse_transform,
    serialize_transform,
    to_matrix,
)
from tests.conftest import parametrize


def test_parse_transform_list() -> None:
    assert parse_transform("translate(10,0) rotate(90)") == [
        TransformFunction("translate", (10.0, 0.0)),
        TransformFunction("rotate", (90.0,)),
    ]
    assert parse_transform("scale(2),skewX(30)") == [
        TransformFunction("scale", (2.0,)),
        TransformFunction("skewX", (30.0,)),
    ]
    assert parse_transform("  ") == []


@parametrize(
    "text",
    [
        "translate(10",
        "foo(1)",
        "rotate(1 2)",
        "matrix(1 0 0 1 0)",
        "scale(1) x",
        "scale(1),",
        "rotate(1e999)",
        "translate(0 -1e999)",
    ],
)
def test_parse_transform_rejects_malformed(text: str) -> None:
    assert parse_transform(text) is None


def test_composition_applies_right_to_left_on_points() -> None:
    functions = parse_transform("translate(10,0) rotate(90)")
    assert functions is not None
    matrix = compose(functions)
    assert matrix.apply(1.0, 0.0) == (10.0, 1.0)


def test_quarter_turns_are_exact() -> None:
    assert to_matrix(TransformFunction("rotate", (90.0,))) == Matrix(0.0, 1.0, -1.0, 0.0, 0.0, 0.0)
    half_turn = to_matrix(TransformFunction("rotate", (-180.0,)))
    assert half_turn == Matrix(-1.0, 0.0, -0.0, -1.0, 0.0, 0.0)


def test_matrix_helpers() -> None:
    m = Matrix(2.0, 0.0, 0.0, 3.0, 1.0, 1.0)
    assert m.determinant() == 6.0
    assert Matrix.identity().multiply(m) == m
    assert not m.is_identity()
    assert Matrix(1.0, 1e-12, 0.0, 1.0, 0.0, 0.0).is_identity()


def test_rotation_about_a_center() -> None:
    matrix = to_matrix(TransformFunction("rotate", (90.0, 10.0, 10.0)))
    assert matrix.apply(10.0, 10.0) == pytest.approx((10.0, 10.0))
    assert matrix.apply(20.0, 10.0) == pytest.approx((10.0, 20.0))


def test_serialize_trims_default_arguments() -> None:
    functions = [
        TransformFunction("translate", (10.0, 0.0)),
        TransformFunction("scale", (2.0, 2.0)),
        TransformFunction("rotate", (45.0, 0.0, 0.0)),
        TransformFunction("translate", (10.0, -5.0)),
    ]
    assert serialize_transform(functions) == "translate(10)scale(2)rotate(45)translate(10-5)"


def test_serialize_rounds_angles_separately() -> None:
    functions = [
        TransformFunction("rotate", (12.3456,)),
        TransformFunction("translate", (0.12345,)),
    ]
    out = serialize_transform(functions, precision=2, deg_precision=1)
    assert out == "rotate(12.3)translate(.12)"


def test_decompose_offers_identity_first() -> None:
    candidates = decompose(Matrix.identity())
    assert candidates[0] == []
    assert candidates[-1] == [TransformFunction("matrix", tuple(Matrix.identity()))]


def test_decompose_drops_candidates_that_overflow() -> None:
    # The rotation center of this matrix lies beyond the float range
    cos = math.sqrt(1 - 1e-10)
    candidates = decompose(Matrix(cos, 1e-5, -1e-5, cos, 0.0, -1e308))
    assert candidates[-1][0].name == "matrix"
    assert all(math.isfinite(v) for candidate in candidates for fn in candidate for v in fn.args)
    assert not any(len(fn.args) == 3 for candidate in candidates for fn in candidate)


@parametrize(
    "text,expected",
    [
        ("translate(10,0)", "translate(10)"),
        ("rotate(0)", ""),
        ("scale(1)", ""),
        ("translate(10 20) translate(-10 -20)", ""),
        ("matrix(1 0 0 1 10 20)", "translate(10 20)"),
        ("matrix(2 0 0 2 0 0)", "scale(2)"),
        ("rotate(45.00001)", "rotate(45)"),
        ("translate(10 10) rotate(90) translate(-10 -10)", "rotate(90 10 10)"),
    ],
)
def test_minify_transform(text: str, expected: str) -> None:
    assert minify_transform(text, precision=3, deg_precision=3) == expected


def test_minify_transform_invalid_is_none() -> None:
    assert minify_transform("rotate(", precision=3, deg_precision=3) is None
    assert minify_transform("scale(1e200) scale(1e200)", precision=3, deg_precision=3) is None


def test_minified_transform_keeps_the_matrix() -> None:
    text = "translate(3.5 -2) rotate(30) scale(1.5 0.5)"
    minified = minify_transform(text, precision=3, deg_precision=3)
    assert minified is not None
    original = parse_transform(text)
    rebuilt = parse_transform(minified)
    assert original is not None and rebuilt is not None
    assert compose(rebuilt).almost_equal(compose(original), 1e-3, 1e-3)

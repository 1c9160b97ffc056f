# topmark:header:start
#
#   project      : svgtidy
#   file         : transform.py
#   file_relpath : src/svgtidy/codecs/transform.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Transform-list codec (``transform``, ``gradientTransform``, ``patternTransform``).

A transform list is parsed into `TransformFunction` values, composed into one
affine `Matrix`, and re-emitted in the shortest form that still describes the same
matrix after rounding.

Matrix layout follows SVG::

    | a c e |
    | b d f |
    | 0 0 1 |

``compose`` multiplies left to right, so each function applies in the coordinate
system established by the functions before it.

Rounding classes:
    - coordinates (``translate``, rotation centers, ``e``/``f``) round at ``precision``;
    - factors (``scale``, ``a``..``d``) round at ``precision + FACTOR_EXTRA_DIGITS``;
    - angles (``rotate``, ``skewX``, ``skewY``) round at ``deg_precision``.
"""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING, Final, NamedTuple

from svgtidy.codecs.numbers import format_number, join_numbers, parse_number_list, round_value
from svgtidy.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)

FACTOR_EXTRA_DIGITS: Final[int] = 2

# Accepted argument counts per function
ARG_COUNTS: Final[dict[str, tuple[int, ...]]] = {
    "matrix": (6,),
    "translate": (1, 2),
    "scale": (1, 2),
    "rotate": (1, 3),
    "skewX": (1,),
    "skewY": (1,),
}

_FUNCTION_RE: Final[re.Pattern[str]] = re.compile(
    r"\s*(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^()]*)\)\s*,?"
)


class Matrix(NamedTuple):
    """2x3 affine matrix ``(a, b, c, d, e, f)``."""

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @classmethod
    def identity(cls) -> Matrix:
        """Return the identity matrix."""
        return cls(1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    def multiply(self, other: Matrix) -> Matrix:
        """Return ``self x other`` (``other`` applies first)."""
        a, b, c, d, e, f = self
        return Matrix(
            a * other.a + c * other.b,
            b * other.a + d * other.b,
            a * other.c + c * other.d,
            b * other.c + d * other.d,
            a * other.e + c * other.f + e,
            b * other.e + d * other.f + f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Map the point ``(x, y)``."""
        return self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f

    def determinant(self) -> float:
        """Return ``ad - bc``."""
        return self.a * self.d - self.b * self.c

    def almost_equal(
        self,
        other: Matrix,
        tolerance: float = 1e-9,
        translate_tolerance: float | None = None,
    ) -> bool:
        """Compare two matrices term by term.

        Args:
            other (Matrix): The matrix to compare with.
            tolerance (float): Maximum difference for ``a``..``d``.
            translate_tolerance (float | None): Maximum difference for ``e``/``f``;
                defaults to ``tolerance``.

        Returns:
            bool: True if every term is within its tolerance.
        """
        t_tol = tolerance if translate_tolerance is None else translate_tolerance
        return (
            all(abs(x - y) <= tolerance for x, y in zip(self[:4], other[:4]))
            and abs(self.e - other.e) <= t_tol
            and abs(self.f - other.f) <= t_tol
        )

    def is_identity(self, tolerance: float = 1e-9) -> bool:
        """Return True if the matrix is the identity within ``tolerance``."""
        return self.almost_equal(Matrix.identity(), tolerance)


class TransformFunction(NamedTuple):
    """One function of a transform list, e.g. ``TransformFunction("rotate", (45.0,))``."""

    name: str
    args: tuple[float, ...]


def _cos_sin(degrees: float) -> tuple[float, float]:
    # Exact values for quarter turns keep rotate(90) free of 6e-17 noise
    quarter = degrees / 90.0
    if quarter == int(quarter):
        return ((1.0, 0.0), (0.0, 1.0), (-1.0, 0.0), (0.0, -1.0))[int(quarter) % 4]
    rad = math.radians(degrees)
    return math.cos(rad), math.sin(rad)


def parse_transform(text: str) -> list[TransformFunction] | None:
    """Parse a transform list.

    Args:
        text (str): Attribute value such as ``"translate(10,0) rotate(90)"``.

    Returns:
        list[TransformFunction] | None: The functions (``[]`` for blank input), or None
        if ``text`` contains anything that is not a well-formed transform function.
    """
    functions: list[TransformFunction] = []
    pos = 0
    text = text.strip()
    while pos < len(text):
        m = _FUNCTION_RE.match(text, pos)
        if m is None:
            return None
        args = parse_number_list(m.group(2))
        name = m.group(1)
        if args is None or len(args) not in ARG_COUNTS[name]:
            return None
        functions.append(TransformFunction(name, tuple(args)))
        pos = m.end()
    if text.endswith(","):
        return None
    return functions


def to_matrix(function: TransformFunction) -> Matrix:
    """Return the matrix of a single transform function."""
    name, args = function
    if name == "matrix":
        return Matrix(*args)
    if name == "translate":
        return Matrix(1.0, 0.0, 0.0, 1.0, args[0], args[1] if len(args) > 1 else 0.0)
    if name == "scale":
        sx = args[0]
        sy = args[1] if len(args) > 1 else sx
        return Matrix(sx, 0.0, 0.0, sy, 0.0, 0.0)
    if name == "rotate":
        cos, sin = _cos_sin(args[0])
        rotation = Matrix(cos, sin, -sin, cos, 0.0, 0.0)
        if len(args) == 3 and (args[1] or args[2]):
            cx, cy = args[1], args[2]
            return (
                Matrix(1.0, 0.0, 0.0, 1.0, cx, cy)
                .multiply(rotation)
                .multiply(Matrix(1.0, 0.0, 0.0, 1.0, -cx, -cy))
            )
        return rotation
    if name == "skewX":
        return Matrix(1.0, 0.0, math.tan(math.radians(args[0])), 1.0, 0.0, 0.0)
    if name == "skewY":
        return Matrix(1.0, math.tan(math.radians(args[0])), 0.0, 1.0, 0.0, 0.0)
    raise ValueError(f"unknown transform function: {name}")


def compose(functions: Iterable[TransformFunction]) -> Matrix:
    """Compose functions left to right into a single matrix."""
    result = Matrix.identity()
    for function in functions:
        result = result.multiply(to_matrix(function))
    return result


def _round_function(
    function: TransformFunction, precision: int, deg_precision: int
) -> TransformFunction:
    name, args = function
    factor_precision = precision + FACTOR_EXTRA_DIGITS
    if name == "matrix":
        rounded = tuple(round_value(v, factor_precision) for v in args[:4]) + tuple(
            round_value(v, precision) for v in args[4:]
        )
    elif name == "scale":
        rounded = tuple(round_value(v, factor_precision) for v in args)
    elif name == "rotate":
        rounded = (round_value(args[0], deg_precision),) + tuple(
            round_value(v, precision) for v in args[1:]
        )
    elif name in ("skewX", "skewY"):
        rounded = (round_value(args[0], deg_precision),)
    else:
        rounded = tuple(round_value(v, precision) for v in args)
    return TransformFunction(name, rounded)


def _trim_defaults(function: TransformFunction) -> TransformFunction:
    name, args = function
    if name == "translate" and len(args) == 2 and args[1] == 0:
        return TransformFunction(name, args[:1])
    if name == "scale" and len(args) == 2 and args[0] == args[1]:
        return TransformFunction(name, args[:1])
    if name == "rotate" and len(args) == 3 and args[1] == 0 and args[2] == 0:
        return TransformFunction(name, args[:1])
    return function


def serialize_transform(
    functions: Sequence[TransformFunction],
    *,
    precision: int | None = None,
    deg_precision: int | None = None,
    remove_leading_zero: bool = True,
) -> str:
    """Emit a transform list in compact form.

    Arguments equal to the function's default are dropped (``translate(x 0)``
    becomes ``translate(x)``) and functions are written back to back.

    Args:
        functions (Sequence[TransformFunction]): Functions to emit.
        precision (int | None): Fractional digits for coordinates; None keeps everything.
        deg_precision (int | None): Fractional digits for angles; defaults to ``precision``.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.

    Returns:
        str: The serialized transform list.
    """
    if deg_precision is None:
        deg_precision = precision
    parts: list[str] = []
    for function in functions:
        if precision is not None and deg_precision is not None:
            function = _round_function(function, precision, deg_precision)
        name, args = _trim_defaults(function)
        formatted = [format_number(v, None, remove_leading_zero=remove_leading_zero) for v in args]
        parts.append(f"{name}({join_numbers(formatted)})")
    return "".join(parts)


def _is_zero(value: float) -> bool:
    return abs(value) < 1e-12


def decompose(matrix: Matrix) -> list[list[TransformFunction]]:
    """Return equivalent function lists for ``matrix``, shortest forms first.

    The candidates are exact (unrounded). Callers round them and keep those that
    still rebuild ``matrix`` within tolerance.

    Args:
        matrix (Matrix): The composed matrix.

    Returns:
        list[list[TransformFunction]]: Candidate lists. ``[]`` stands for the identity. Lists
        with an argument that overflows are dropped.
    """
    a, b, c, d, e, f = matrix
    candidates: list[list[TransformFunction]] = [[]]

    translate: list[TransformFunction] = []
    if not (_is_zero(e) and _is_zero(f)):
        translate = [TransformFunction("translate", (e, f))]

    if _is_zero(b) and _is_zero(c):
        scale = [] if a == 1 and d == 1 else [TransformFunction("scale", (a, d))]
        candidates.append(translate + scale)
    if a == 1 and d == 1 and _is_zero(b):
        candidates.append(translate + [TransformFunction("skewX", (math.degrees(math.atan(c)),))])
    if a == 1 and d == 1 and _is_zero(c):
        candidates.append(translate + [TransformFunction("skewY", (math.degrees(math.atan(b)),))])

    # General form: translate . rotate . skewX . scale
    sx = math.hypot(a, b)
    if sx > 0:
        angle = math.degrees(math.atan2(b, a))
        cos, sin = a / sx, b / sx
        sy = d * cos - c * sin
        if not _is_zero(sy):
            skew = math.degrees(math.atan((c * cos + d * sin) / sy))
            tail: list[TransformFunction] = []
            if not _is_zero(skew):
                tail.append(TransformFunction("skewX", (skew,)))
            if not (abs(sx - 1) < 1e-12 and abs(sy - 1) < 1e-12):
                tail.append(TransformFunction("scale", (sx, sy)))
            rotate = [] if _is_zero(angle) else [TransformFunction("rotate", (angle,))]
            candidates.append(translate + rotate + tail)
            if translate and rotate:
                # Fold the translation into a rotation center
                one_minus_cos = 1 - cos
                denom = one_minus_cos * one_minus_cos + sin * sin
                if not _is_zero(denom):
                    cx = (one_minus_cos * e - sin * f) / denom
                    cy = (sin * e + one_minus_cos * f) / denom
                    candidates.append([TransformFunction("rotate", (angle, cx, cy))] + tail)

    candidates.append([TransformFunction("matrix", tuple(matrix))])
    return [
        candidate
        for candidate in candidates
        if all(math.isfinite(v) for fn in candidate for v in fn.args)
    ]


def minify_transform(
    text: str,
    *,
    precision: int,
    deg_precision: int,
    remove_leading_zero: bool = True,
) -> str | None:
    """Return the shortest encoding of a transform list.

    The input list re-rounded is always acceptable. Any other candidate from
    `decompose` is used only if the matrix rebuilt from its rounded arguments matches
    the input matrix within half a unit of the last kept digit.

    Args:
        text (str): The original attribute value.
        precision (int): Fractional digits for coordinates.
        deg_precision (int): Fractional digits for angles.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.

    Returns:
        str | None: The minified value (``""`` for the identity), or None if ``text``
        is not a valid transform list or its composed matrix overflows.
    """
    functions = parse_transform(text)
    if functions is None:
        return None
    target = compose(functions)
    if not all(math.isfinite(v) for v in target):
        return None
    tolerance = 0.5 * 10.0 ** -(precision + FACTOR_EXTRA_DIGITS)
    translate_tolerance = 0.5 * 10.0**-precision

    def render(candidate: list[TransformFunction]) -> str:
        return serialize_transform(
            candidate,
            precision=precision,
            deg_precision=deg_precision,
            remove_leading_zero=remove_leading_zero,
        )

    best = render(functions)
    for candidate in decompose(target):
        encoded = render(candidate)
        if len(encoded) >= len(best):
            continue
        rounded = [_round_function(fn, precision, deg_precision) for fn in candidate]
        # Account for binary noise left after decimal rounding
        if compose(rounded).almost_equal(
            target, tolerance * 1.000001, translate_tolerance * 1.000001
        ):
            best = encoded
    logger.trace("minify_transform: %r -> %r", text, best)
    return best

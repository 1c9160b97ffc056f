# topmark:header:start
#
#   project      : svgtidy
#   file         : path_data.py
#   file_relpath : src/svgtidy/codecs/path_data.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Path-data codec for the ``d`` attribute.

Grammar handled by `parse_path_data`:

- commands ``M L H V C S Q T A Z`` in absolute (upper case) and relative (lower
  case) form;
- implicit repetition: extra argument groups repeat the command, except that
  the groups following a moveto are linetos;
- numbers that run together (``10-5``, ``.5.5``, ``1e2.5``);
- arc flags written as a single ``0``/``1`` character, possibly followed
  directly by the next number.

Parsing is strict. A string that does not match the grammar yields ``None`` and
callers leave the attribute untouched.

`serialize_path_data` emits the shortest form of a segment list for a fixed
rounding, and `optimize_path` picks the shorter of the absolute and relative
form per segment, rounding against the point the output actually reaches so that
rounding errors never accumulate along a relative path.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from svgtidy.codecs.numbers import NUMBER_RE, format_number, needs_separator, round_value
from svgtidy.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from svgtidy.config.logging import SvgtidyLogger

logger: SvgtidyLogger = get_logger(__name__)

# Number of arguments per command
ARITY: Final[dict[str, int]] = {
    "M": 2,
    "L": 2,
    "H": 1,
    "V": 1,
    "C": 6,
    "S": 4,
    "Q": 4,
    "T": 2,
    "A": 7,
    "Z": 0,
}

COMMAND_LETTERS: Final[frozenset[str]] = frozenset("MmLlHhVvCcSsQqTtAaZz")

_SPACE_RE: Final[re.Pattern[str]] = re.compile(r"[ \t\r\n\f]*")


@dataclass(frozen=True, slots=True)
class PathSegment:
    """One path command with its arguments.

    Attributes:
        command (str): Upper-case command letter (``"M"``, ``"C"``, ...).
        relative (bool): True for the lower-case (relative) form.
        args (tuple[float, ...]): Arguments; for arcs the two flags are 0.0 or 1.0.
    """

    command: str
    relative: bool
    args: tuple[float, ...]

    @property
    def letter(self) -> str:
        """Return the letter as written in path data."""
        return self.command.lower() if self.relative else self.command


class _PathScanner:
    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0

    def skip_space(self) -> None:
        m = _SPACE_RE.match(self.text, self.pos)
        if m:
            self.pos = m.end()

    def at_end(self) -> bool:
        return self.pos >= len(self.text)

    def peek(self) -> str:
        return self.text[self.pos]

    def skip_separator(self) -> bool:
        """Skip whitespace and one optional comma. Return True if a comma was seen."""
        self.skip_space()
        if not self.at_end() and self.peek() == ",":
            self.pos += 1
            self.skip_space()
            return True
        return False

    def number(self) -> float | None:
        m = NUMBER_RE.match(self.text, self.pos)
        if m is None:
            return None
        value = float(m.group(0))
        if not math.isfinite(value):
            return None
        self.pos = m.end()
        return value

    def flag(self) -> float | None:
        if self.at_end() or self.peek() not in "01":
            return None
        value = float(self.peek())
        self.pos += 1
        return value

    def starts_number(self) -> bool:
        return not self.at_end() and NUMBER_RE.match(self.text, self.pos) is not None


def _read_group(scanner: _PathScanner, command: str) -> tuple[float, ...] | None:
    args: list[float] = []
    for i in range(ARITY[command]):
        if i > 0:
            scanner.skip_separator()
        value = scanner.flag() if command == "A" and i in (3, 4) else scanner.number()
        if value is None:
            return None
        args.append(value)
    return tuple(args)


def parse_path_data(text: str) -> list[PathSegment] | None:
    """Parse path data into segments.

    Args:
        text (str): The value of a ``d`` attribute.

    Returns:
        list[PathSegment] | None: The segments (``[]`` for blank input), or None if
        ``text`` does not follow the path grammar or a coordinate is too large to
        represent (relative coordinates included once made absolute).
    """
    scanner = _PathScanner(text)
    segments: list[PathSegment] = []
    scanner.skip_space()
    while not scanner.at_end():
        letter = scanner.peek()
        if letter not in COMMAND_LETTERS:
            return None
        scanner.pos += 1
        command = letter.upper()
        relative = letter.islower()
        if not segments and command != "M":
            return None

        if command == "Z":
            segments.append(PathSegment("Z", relative, ()))
            scanner.skip_space()
            continue

        repeat = command
        groups = 0
        scanner.skip_space()
        while True:
            if groups > 0:
                comma = scanner.skip_separator()
                if not scanner.starts_number():
                    if comma:
                        return None
                    break
            args = _read_group(scanner, repeat)
            if args is None:
                return None
            segments.append(PathSegment(repeat, relative, args))
            if command == "M":
                repeat = "L"
            groups += 1
        scanner.skip_space()
    if not all(math.isfinite(v) for seg in to_absolute(segments) for v in seg.args):
        return None
    return segments


def _implicit(previous: str | None, letter: str) -> bool:
    if previous is None:
        return False
    if previous == "M":
        return letter == "L"
    if previous == "m":
        return letter == "l"
    return letter == previous and letter not in "Zz"


def serialize_path_data(
    segments: Sequence[PathSegment],
    *,
    precision: int | None = None,
    remove_leading_zero: bool = True,
) -> str:
    """Emit the shortest textual form of ``segments``.

    Repeated command letters are omitted, a moveto is followed by implicit linetos,
    and separators are dropped where a sign or a second decimal point already
    delimits the next number.

    Args:
        segments (Sequence[PathSegment]): Segments to emit.
        precision (int | None): Fractional digits per number; None keeps full precision.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.

    Returns:
        str: The path data (``""`` for an empty list).
    """
    out: list[str] = []
    prev_letter: str | None = None
    last_number: str | None = None
    for seg in segments:
        letter = seg.letter
        if not _implicit(prev_letter, letter):
            out.append(letter)
            last_number = None
        for i, arg in enumerate(seg.args):
            if seg.command == "A" and i in (3, 4):
                text = "1" if arg else "0"
            else:
                text = format_number(arg, precision, remove_leading_zero=remove_leading_zero)
            if needs_separator(last_number, text):
                out.append(" ")
            out.append(text)
            last_number = text
        prev_letter = letter
    return "".join(out)


def _absolute_args(seg: PathSegment, x: float, y: float) -> tuple[float, ...]:
    if not seg.relative:
        return seg.args
    args = list(seg.args)
    if seg.command == "H":
        args[0] += x
    elif seg.command == "V":
        args[0] += y
    elif seg.command == "A":
        args[5] += x
        args[6] += y
    else:
        for i in range(0, len(args), 2):
            args[i] += x
            args[i + 1] += y
    return tuple(args)


def _end_point(
    seg: PathSegment, x: float, y: float, start: tuple[float, float]
) -> tuple[float, float]:
    """Return the current point after an absolute ``seg``."""
    if seg.command == "Z":
        return start
    if seg.command == "H":
        return seg.args[0], y
    if seg.command == "V":
        return x, seg.args[0]
    return seg.args[-2], seg.args[-1]


def to_absolute(segments: Iterable[PathSegment]) -> list[PathSegment]:
    """Rewrite every segment in absolute form (``H``/``V`` stay axis-aligned)."""
    result: list[PathSegment] = []
    x = y = 0.0
    start = (0.0, 0.0)
    for seg in segments:
        abs_seg = PathSegment(seg.command, False, _absolute_args(seg, x, y))
        x, y = _end_point(abs_seg, x, y, start)
        if seg.command == "M":
            start = (x, y)
        result.append(abs_seg)
    return result


def _coordinate_mask(command: str) -> tuple[str, ...]:
    """Return, per argument, ``"x"``/``"y"`` for coordinates and ``""`` otherwise."""
    if command == "H":
        return ("x",)
    if command == "V":
        return ("y",)
    if command == "A":
        return ("", "", "", "", "", "x", "y")
    return ("x", "y") * (ARITY[command] // 2)


def optimize_path(
    segments: Sequence[PathSegment],
    *,
    precision: int | None,
    remove_leading_zero: bool = True,
) -> list[PathSegment]:
    """Round ``segments`` and choose the shorter absolute or relative form per segment.

    Absolute coordinates are rounded first. Relative arguments are then derived from
    the rounded previous point, so the output reaches exactly the rounded absolute
    points whichever form is picked. Lines with a zero delta on one axis become
    ``H``/``V``. A relative form whose delta overflows is never picked.

    Args:
        segments (Sequence[PathSegment]): Parsed segments (absolute or relative).
        precision (int | None): Fractional digits to keep.
        remove_leading_zero (bool): Leading-zero policy used to measure candidates.

    Returns:
        list[PathSegment]: Rounded segments ready for `serialize_path_data`.
    """

    def fmt(value: float) -> str:
        return format_number(value, precision, remove_leading_zero=remove_leading_zero)

    def cost(seg: PathSegment) -> int:
        return len(
            serialize_path_data([seg], precision=precision, remove_leading_zero=remove_leading_zero)
        )

    result: list[PathSegment] = []
    x = y = 0.0
    start = (0.0, 0.0)
    for seg in to_absolute(segments):
        if seg.command == "Z":
            result.append(PathSegment("Z", True, ()))
            x, y = start
            continue

        command = seg.command
        mask = _coordinate_mask(command)
        rounded = tuple(
            value if command == "A" and i in (3, 4) else round_value(value, precision)
            for i, value in enumerate(seg.args)
        )

        if command == "L":
            if fmt(rounded[1]) == fmt(y):
                command, rounded, mask = "H", (rounded[0],), ("x",)
            elif fmt(rounded[0]) == fmt(x):
                command, rounded, mask = "V", (rounded[1],), ("y",)

        relative_args = tuple(
            round_value(value - (x if axis == "x" else y), precision) if axis else value
            for value, axis in zip(rounded, mask)
        )
        absolute = PathSegment(command, False, rounded)
        relative = PathSegment(command, True, relative_args)

        if not result:
            # The first moveto is absolute whatever its letter
            chosen = absolute
        elif not all(math.isfinite(v) for v in relative_args):
            chosen = absolute
        else:
            chosen = relative if cost(relative) <= cost(absolute) else absolute
        result.append(chosen)

        x, y = _end_point(absolute, x, y, start)
        if command == "M":
            start = (x, y)

    logger.trace("optimize_path: %d segment(s) at precision %s", len(result), precision)
    return result


def bounding_box(segments: Iterable[PathSegment]) -> tuple[float, float, float, float] | None:
    """Return a conservative ``(min_x, min_y, max_x, max_y)`` box around the path.

    The box covers every end point and control point. Arcs are expanded by their
    largest radius around both end points.

    Returns:
        tuple[float, float, float, float] | None: The box, or None for an empty path.
    """
    xs: list[float] = []
    ys: list[float] = []
    x = y = 0.0
    start = (0.0, 0.0)
    for seg in to_absolute(segments):
        if seg.command == "A":
            radius = max(abs(seg.args[0]), abs(seg.args[1]))
            for px, py in ((x, y), (seg.args[5], seg.args[6])):
                xs.extend((px - radius, px + radius))
                ys.extend((py - radius, py + radius))
        elif seg.command == "H":
            xs.append(seg.args[0])
            ys.append(y)
        elif seg.command == "V":
            xs.append(x)
            ys.append(seg.args[0])
        elif seg.command != "Z":
            xs.extend(seg.args[0::2])
            ys.extend(seg.args[1::2])
        x, y = _end_point(seg, x, y, start)
        if seg.command == "M":
            start = (x, y)
    if not xs:
        return None
    return min(xs), min(ys), max(xs), max(ys)


def boxes_intersect(
    a: tuple[float, float, float, float],
    b: tuple[float, float, float, float],
) -> bool:
    """Return True if two boxes overlap or touch."""
    return not (a[2] < b[0] or b[2] < a[0] or a[3] < b[1] or b[3] < a[1])

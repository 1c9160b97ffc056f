# topmark:header:start
#
#   project      : svgtidy
#   file         : numbers.py
#   file_relpath : src/svgtidy/codecs/numbers.py
#   license      : MIT
#   copyright    : (c) 2025 svgtidy contributors
#
# topmark:header:end

"""Number parsing, rounding and compact formatting.

Every codec and every numeric pass formats numbers through `format_number` so
that rounding behaves the same everywhere: decimal half-away-from-zero at a
fixed number of fractional digits, no exponent notation, no trailing zeros,
optional removal of the integer-part leading zero.
"""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# SVG number grammar: sign, digits with an optional fraction, optional exponent
NUMBER_PATTERN: Final[str] = r"[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
NUMBER_RE: Final[re.Pattern[str]] = re.compile(NUMBER_PATTERN)

_SEPARATOR_RE: Final[re.Pattern[str]] = re.compile(r"\s*,\s*|\s+")

_NUMBER_WITH_UNIT_RE: Final[re.Pattern[str]] = re.compile(
    rf"^\s*({NUMBER_PATTERN})(px|pt|pc|mm|cm|in|em|ex|%)?\s*$"
)

# Absolute length units and their size in user units (CSS px)
ABSOLUTE_UNITS: Final[dict[str, float]] = {
    "px": 1.0,
    "pt": 4.0 / 3.0,
    "pc": 16.0,
    "mm": 96.0 / 25.4,
    "cm": 96.0 / 2.54,
    "in": 96.0,
}


def parse_number(text: str) -> float | None:
    """Parse a bare number, returning None for anything else."""
    m = NUMBER_RE.fullmatch(text.strip())
    if m is None:
        return None
    value = float(m.group(0))
    return value if math.isfinite(value) else None


def parse_length(text: str) -> tuple[float, str] | None:
    """Split ``text`` into a number and its (possibly empty) unit suffix.

    Args:
        text (str): Attribute value such as ``"10"``, ``"1.5mm"`` or ``"50%"``.

    Returns:
        tuple[float, str] | None: ``(value, unit)`` or None if ``text`` is not a length.
    """
    m = _NUMBER_WITH_UNIT_RE.match(text)
    if m is None:
        return None
    value = float(m.group(1))
    if not math.isfinite(value):
        return None
    return value, m.group(2) or ""


def parse_number_list(text: str) -> list[float] | None:
    """Parse numbers separated by whitespace and/or single commas.

    Numbers may run together when a sign or a second decimal point delimits them
    (``"10-5"``, ``".5.5"``). Returns None on any other content and for
    numbers too large to represent.
    """
    values: list[float] = []
    length = len(text)
    pos = length - len(text.lstrip())
    need_number = False
    while pos < length:
        m = NUMBER_RE.match(text, pos)
        if m is None:
            return None
        value = float(m.group(0))
        if not math.isfinite(value):
            return None
        values.append(value)
        pos = m.end()
        sep = _SEPARATOR_RE.match(text, pos)
        need_number = False
        if sep:
            need_number = "," in sep.group(0)
            pos = sep.end()
    if need_number:
        return None
    return values


def needs_separator(previous: str | None, current: str) -> bool:
    """Return True if ``current`` cannot directly follow the number ``previous``."""
    if previous is None or current.startswith("-"):
        return False
    return not (current.startswith(".") and ("." in previous or "e" in previous))


def join_numbers(texts: list[str]) -> str:
    """Join formatted numbers, dropping the space where a sign or ``.`` delimits them."""
    out: list[str] = []
    previous: str | None = None
    for text in texts:
        if needs_separator(previous, text):
            out.append(" ")
        out.append(text)
        previous = text
    return "".join(out)


def _quantize(value: float, precision: int | None) -> Decimal:
    d = Decimal(repr(float(value)))
    if precision is None:
        return d
    with localcontext() as ctx:
        # Wide enough for any finite double at any sane precision
        ctx.prec = 400
        return d.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)


def round_value(value: float, precision: int | None) -> float:
    """Round ``value`` half away from zero to ``precision`` fractional digits."""
    if precision is None or not math.isfinite(value):
        return value
    result = float(_quantize(value, precision))
    return 0.0 if result == 0 else result


def format_number(
    value: float,
    precision: int | None = None,
    *,
    remove_leading_zero: bool = True,
) -> str:
    """Format ``value`` in its shortest decimal form.

    Args:
        value (float): The number to format. Must be finite.
        precision (int | None): Fractional digits to keep; None keeps full precision.
        remove_leading_zero (bool): Emit ``.5`` instead of ``0.5``.

    Returns:
        str: The formatted number, never using exponent notation.
    """
    text = format(_quantize(value, precision), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text in ("-0", ""):
        text = "0"
    if remove_leading_zero:
        if text.startswith("0."):
            text = text[1:]
        elif text.startswith("-0."):
            text = "-" + text[2:]
    return text


def format_length(
    value: float,
    unit: str,
    precision: int | None,
    *,
    remove_px: bool = True,
    convert_to_px: bool = True,
    remove_leading_zero: bool = True,
) -> str:
    """Format a length, optionally normalizing its absolute unit.

    When ``convert_to_px`` is set, an absolute unit is converted to user units if that
    yields a shorter string. ``px`` is dropped when ``remove_px`` is set.
    """
    fmt = format_number(value, precision, remove_leading_zero=remove_leading_zero)
    best = fmt + unit
    if unit in ABSOLUTE_UNITS and unit != "px" and convert_to_px:
        scaled = value * ABSOLUTE_UNITS[unit]
        if not math.isfinite(scaled):
            return best
        converted = format_number(scaled, precision, remove_leading_zero=remove_leading_zero)
        suffix = "" if remove_px else "px"
        if len(converted + suffix) < len(best):
            best = converted + suffix
    elif unit == "px" and remove_px:
        best = fmt
    return best

"""Numeric helpers — rounding and number formatting. No converter imports."""

from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal

_LEADING_FLOAT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)")


def round_half_away(value: float, precision: int) -> float:
    """Round to `precision` decimals, halves away from zero (2.5 → 3, -2.5 → -3).

    Works on the shortest decimal form of the float, so any precision is
    accepted; a value with no more decimals than asked for comes back unchanged.
    """
    if not math.isfinite(value):
        return value
    exact = Decimal(repr(float(value)))
    if exact.as_tuple().exponent < -precision:
        exact = exact.quantize(Decimal(1).scaleb(-precision), rounding=ROUND_HALF_UP)
    rounded = float(exact)
    return rounded if rounded != 0 else 0.0


def round_coords(coords: list[list[float]], precision: int | None) -> list[list[float]]:
    """Round every (x, y) pair. `precision=None` passes coordinates through."""
    if precision is None:
        return coords
    return [[round_half_away(x, precision), round_half_away(y, precision)] for x, y in coords]


def parse_leading_float(value: str | None) -> float | None:
    """Parse the numeric prefix of an SVG length: "100px" → 100.0, "abc" → None."""
    if not value:
        return None
    match = _LEADING_FLOAT_RE.match(value)
    if not match:
        return None
    number = float(match.group(1))
    if math.isnan(number) or math.isinf(number):
        return None
    return number


def format_number(value: float) -> str:
    """Compact decimal form for markup attributes: 10.0 → "10", 0.25 → "0.25"."""
    number = float(value)
    if number.is_integer() and abs(number) < 1e15:
        return str(int(number))
    return repr(number)

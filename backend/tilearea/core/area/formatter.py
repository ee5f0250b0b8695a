"""Number formatting for area figures (en-US grouping, capped precision)."""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from tilearea.core.area.aggregator import AreaResult

DEFAULT_FRACTION_DIGITS = 4


def format_number(n: float, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> str:
    """Format ``n`` with thousands separators and at most ``max_fraction_digits`` decimals.

    Trailing zeros in the fractional part are dropped, so 2.5 stays
    "2.5" and 1150000.0 becomes "1,150,000".
    """
    if math.isnan(n):
        return "NaN"
    if math.isinf(n):
        return "∞" if n > 0 else "-∞"

    value = Decimal(repr(float(n)))
    quantum = Decimal(1).scaleb(-max_fraction_digits)
    with localcontext() as ctx:
        # Room for every integer digit plus the requested fraction digits
        ctx.prec = max(ctx.prec, value.adjusted() + max_fraction_digits + 2)
        rounded = value.quantize(quantum, rounding=ROUND_HALF_UP)

    if rounded.is_zero():
        return "0"

    text = f"{rounded:,f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_result(result: AreaResult, max_fraction_digits: int = DEFAULT_FRACTION_DIGITS) -> dict[str, str]:
    return {
        "mm2": format_number(result.mm2, max_fraction_digits),
        "cm2": format_number(result.cm2, max_fraction_digits),
        "m2": format_number(result.m2, max_fraction_digits),
    }

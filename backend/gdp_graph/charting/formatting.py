"""
Text helpers shared by the SVG renderer, the tooltip and the plotly view.
"""

import datetime as dt
import math
from decimal import Decimal
from typing import Union

Number = Union[int, float]


def number_string(n: Number) -> str:
    """
    Plain decimal rendering of a number.

    Integral floats drop their trailing ``.0`` so that ``243.0`` and ``243``
    are written the same way in attributes and labels. Small fractions stay
    in fixed notation down to 1e-7 (``0.00001`` rather than ``1e-05``).
    """
    if isinstance(n, float) and math.isfinite(n):
        if n.is_integer() and abs(n) < 1e21:
            return str(int(n))
        text = repr(n)
        if "e" in text and 1e-7 <= abs(n) < 1e21:
            # shortest round-trip digits, written out without the exponent
            return format(Decimal(text), "f")
        return text
    return str(n)


def group_digits(text: str) -> str:
    """Comma-group the integer digits of an already formatted number."""
    if "e" in text:
        # exponent notation has no digit groups to separate
        return text

    sign = ""
    if text.startswith("-"):
        sign, text = "-", text[1:]

    point = text.find(".")
    if point == -1:
        digits, fraction = text, ""
    else:
        digits, fraction = text[:point], text[point:]

    groups = []
    while len(digits) > 3:
        groups.insert(0, digits[-3:])
        digits = digits[:-3]
    groups.insert(0, digits)

    return sign + ",".join(groups) + fraction


def format_number(n: Number) -> str:
    """
    Insert a comma every three integer digits, counting leftwards from the
    decimal point. The sign and the fractional part are kept as they are.

        >>> format_number(1234567)
        '1,234,567'
        >>> format_number(-1234.5)
        '-1,234.5'
    """
    return group_digits(number_string(n))


def get_quarter(month: int) -> int:
    """Quarter of the year (1-4) for a zero-indexed month."""
    return month // 3 + 1


def quarter_label(date: dt.date) -> str:
    return f"{date.year} Q{get_quarter(date.month - 1)}"


def amount_label(value: Number) -> str:
    return "$" + format_number(value) + " Billion"

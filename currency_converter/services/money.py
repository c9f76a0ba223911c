"""Money / rounding helpers.

Centralized so the amount normalizer, the calculator and the API responses
use identical rounding semantics.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP

TWO_PLACES = Decimal("0.01")


def to_decimal(value: float | int | str | Decimal) -> Decimal:
    if isinstance(value, Decimal):
        return value
    # str() first so floats keep their shortest repr (0.1 -> "0.1")
    return Decimal(str(value))


def round2(value: float | int | str | Decimal) -> Decimal:
    return to_decimal(value).quantize(TWO_PLACES, rounding=ROUND_HALF_UP)


def format2(value: float | int | str | Decimal) -> str:
    return f"{round2(value):.2f}"

"""
Rounding helpers for report metrics.

Report values round half away from zero (2.5 -> 3), matching how the
figures are presented to users, rather than Python's round-half-to-even.
Rounding is applied to the exact binary value of the float, so a result
such as 29 / 20 (stored as 1.4499999999999999556) rounds to 1.4.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Union

Number = Union[int, float, Decimal]

_ONE_PLACE = Decimal("0.1")


def round_half_up(value: Number) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(float(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def one_decimal(value: Number) -> Decimal:
    """Round the float value to one decimal place, halves away from zero."""
    return Decimal(float(value)).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)


def percentage(part: int, whole: int) -> Decimal:
    """``part`` as a percentage of ``whole`` with one decimal place."""
    if whole <= 0:
        return Decimal("0.0")
    return one_decimal(part / whole * 100)

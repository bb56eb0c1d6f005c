"""
Tests for report rounding helpers.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from tubewrapped.utils.numbers import one_decimal, percentage, round_half_up


@pytest.mark.parametrize(
    "value, expected",
    [(0.5, 1), (1.5, 2), (2.5, 3), (2.49, 2), (40.5, 41), (0, 0), (7, 7)],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.25, Decimal("1.3")),
        (1.35, Decimal("1.4")),
        (2, Decimal("2.0")),
        (Decimal("0.05"), Decimal("0.1")),
    ],
)
def test_one_decimal(value, expected):
    assert one_decimal(value) == expected


@pytest.mark.parametrize(
    "value, expected",
    [
        # 29 / 20 is stored as 1.44999999999999995559...
        (29 / 20, Decimal("1.4")),
        (1.45, Decimal("1.4")),
        (2.675, Decimal("2.7")),
    ],
)
def test_one_decimal_rounds_binary_value(value, expected):
    assert one_decimal(value) == expected


def test_percentage():
    assert percentage(1, 3) == Decimal("33.3")
    assert percentage(2, 3) == Decimal("66.7")
    assert percentage(1, 8) == Decimal("12.5")
    assert percentage(3, 3) == Decimal("100.0")


def test_percentage_rounds_float_quotient():
    # 29 / 2000 * 100 evaluates to 1.4499999999999999556
    assert percentage(29, 2000) == Decimal("1.4")


def test_percentage_of_nothing_is_zero():
    assert percentage(0, 0) == Decimal("0.0")

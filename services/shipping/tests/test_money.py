"""Tests for decimal price to Money conversion."""

from decimal import Decimal

import pytest

from services.shipping.money import money_from_decimal, money_to_decimal


@pytest.mark.unit
@pytest.mark.parametrize(
    ("amount", "units", "nanos"),
    [
        ("5.99", 5, 990_000_000),
        ("0", 0, 0),
        ("12", 12, 0),
        ("0.000000001", 0, 1),
        ("1234.5", 1234, 500_000_000),
        ("-3.25", -3, -250_000_000),
    ],
)
def test_money_from_decimal(amount, units, nanos):
    money = money_from_decimal(Decimal(amount))

    assert money.currency_code == "USD"
    assert (money.units, money.nanos) == (units, nanos)
    assert money_to_decimal(money) == Decimal(amount)


@pytest.mark.unit
def test_rounds_half_even_to_whole_nanos():
    assert money_from_decimal(Decimal("1.0000000005")).nanos == 0
    assert money_from_decimal(Decimal("1.0000000015")).nanos == 2


@pytest.mark.unit
def test_currency_code_is_kept():
    assert money_from_decimal(Decimal("1"), "EUR").currency_code == "EUR"


@pytest.mark.unit
@pytest.mark.parametrize("amount", ["NaN", "Infinity", "-Infinity"])
def test_non_finite_amounts_are_rejected(amount):
    with pytest.raises(ValueError):
        money_from_decimal(Decimal(amount))


@pytest.mark.unit
@pytest.mark.parametrize("amount", ["1e20", "123456789012345678901", "-1e19"])
def test_amounts_beyond_units_range_are_rejected(amount):
    with pytest.raises(ValueError, match="out of range"):
        money_from_decimal(Decimal(amount))


@pytest.mark.unit
def test_largest_units_value_converts():
    money = money_from_decimal(Decimal("9223372036854775807.999999999"))

    assert (money.units, money.nanos) == (2**63 - 1, 999_999_999)

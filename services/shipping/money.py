"""Conversion between decimal prices and the Money wire representation."""

from __future__ import annotations

from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation

from .models import Money

NANOS_PER_UNIT = 1_000_000_000
# Money.units is a signed 64-bit integer on the wire
MAX_UNITS = 2**63 - 1
_NANO = Decimal(1).scaleb(-9)


def money_from_decimal(amount: Decimal, currency_code: str = "USD") -> Money:
    """Split ``amount`` into whole units and nanos.

    The amount is rounded half-even to a whole number of nanos. ``units``
    truncates toward zero so that units and nanos share the amount's sign.

    >>> money_from_decimal(Decimal("5.99"))
    Money(currency_code='USD', units=5, nanos=990000000)

    Raises:
        ValueError: if the amount is not finite or does not fit in Money
    """
    if not amount.is_finite():
        raise ValueError(f"cannot represent {amount} as money")
    if abs(amount) >= MAX_UNITS + 1:
        raise ValueError(f"{amount} is out of range for money")

    try:
        quantized = amount.quantize(_NANO, rounding=ROUND_HALF_EVEN)
    except InvalidOperation as exc:
        raise ValueError(f"cannot represent {amount} as money") from exc
    units = int(quantized)
    if abs(units) > MAX_UNITS:
        raise ValueError(f"{amount} is out of range for money")
    nanos = int((quantized - units) * NANOS_PER_UNIT)
    return Money(currency_code=currency_code, units=units, nanos=nanos)


def money_to_decimal(money: Money) -> Decimal:
    return Decimal(money.units) + Decimal(money.nanos) * _NANO

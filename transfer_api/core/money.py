from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

from .errors import InvalidAmountError

CENTS = Decimal("0.01")


def to_minor_units(amount: Decimal) -> int:
    """Convert a major-unit amount to integer cents, rejecting sub-cent precision."""
    try:
        quantized = amount.quantize(CENTS)
    except InvalidOperation as exc:
        raise InvalidAmountError("Invalid amount") from exc
    if quantized != amount:
        raise InvalidAmountError("Amount cannot have more than 2 decimal places")
    return int(quantized * 100)


def to_major_units(cents: int) -> Union[int, float]:
    # Whole amounts stay integers so 1000 renders as 1000, not 1000.0.
    if cents % 100 == 0:
        return cents // 100
    return cents / 100


def format_amount(amount: Decimal) -> str:
    # 200 -> "200", 12.5 -> "12.5"
    normalized = amount.normalize()
    if normalized == normalized.to_integral_value():
        return str(normalized.quantize(Decimal(1)))
    return format(normalized, "f")

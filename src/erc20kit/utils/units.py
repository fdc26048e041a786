"""Conversions between human-readable token amounts and base units."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Union

from erc20kit.errors import ValidationError

Numeric = Union[int, str, Decimal]


def to_base_units(amount: Numeric, decimals: int) -> int:
    """Scale a token amount to its integer base-unit representation.

    ``to_base_units(100, 18) == 100 * 10**18``. Floats are rejected because
    they cannot represent most decimal fractions exactly; pass a string or
    ``Decimal`` instead.

    Raises:
        ValidationError: If the amount is negative, not numeric, or has more
            fractional digits than ``decimals`` allows
    """
    if decimals < 0:
        raise ValidationError("decimals must be non-negative")
    if isinstance(amount, (bool, float)):
        raise ValidationError("amount must be an int, str or Decimal")
    try:
        value = Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"amount is not a number: {amount!r}") from None
    if not value.is_finite():
        raise ValidationError("amount must be finite")
    if value < 0:
        raise ValidationError("amount must be non-negative")

    with localcontext() as ctx:
        # Wide enough that scaling never rounds
        ctx.prec = len(value.as_tuple().digits) + decimals + 1
        scaled = value.scaleb(decimals)
    if scaled != scaled.to_integral_value():
        raise ValidationError(f"amount has more than {decimals} decimal places")
    return int(scaled)


def from_base_units(raw: int, decimals: int) -> Decimal:
    """Inverse of ``to_base_units``; returns an exact ``Decimal``."""
    if decimals < 0:
        raise ValidationError("decimals must be non-negative")
    with localcontext() as ctx:
        ctx.prec = len(str(abs(raw))) + 1
        return Decimal(raw).scaleb(-decimals)

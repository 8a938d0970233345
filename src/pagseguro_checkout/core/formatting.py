"""
Text conversions for the numeric fields of the checkout XML.

PagSeguro expects amounts as fixed-point text with exactly two decimals and a
period separator (``"10.50"``) and counts as plain integers. Formatting goes
through :class:`decimal.Decimal` so the host locale never leaks in.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

__all__ = ["format_amount", "format_quantity"]

CENTS = Decimal("0.01")

Number = Union[Decimal, float, int]


def format_amount(value: Number) -> str:
    if isinstance(value, bool) or not isinstance(value, (Decimal, float, int)):
        raise TypeError(f"Amount must be a number, got {type(value).__name__}")

    # repr() keeps the shortest round-tripping form of a float, so 2.675 stays 2.675
    amount = value if isinstance(value, Decimal) else Decimal(repr(value))
    if not amount.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")

    try:
        quantized = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueError(f"Amount out of range: {value!r}") from exc
    if quantized.is_zero():
        quantized = abs(quantized)
    return f"{quantized:f}"


def format_quantity(value: int) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Quantity must be an integer, got {type(value).__name__}")
    return str(value)

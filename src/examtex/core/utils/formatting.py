"""
Module: core.utils.formatting

Purpose:
    Locale-invariant number formatting for points, lengths and minutes.

Key Functions:
    - to_decimal(): Coerce int/float/str/Decimal to Decimal
    - format_decimal(): Shortest plain rendering without trailing zeros
    - format_length(): Centimetre length like "3cm"
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Union

Number = Union[int, float, str, Decimal]


def to_decimal(value: Number) -> Decimal:
    """Convert a numeric value to Decimal via its string form."""
    if isinstance(value, bool):
        raise ValueError(f"Not a number: {value!r}")
    if isinstance(value, Decimal):
        d = value
    else:
        try:
            d = Decimal(str(value).strip())
        except InvalidOperation as e:
            raise ValueError(f"Not a number: {value!r}") from e
    if not d.is_finite():
        raise ValueError(f"Not a finite number: {value!r}")
    return d


def format_decimal(value: Number) -> str:
    """
    Format a number with no forced decimals and no grouping.

    >>> format_decimal(Decimal("5.00"))
    '5'
    >>> format_decimal(2.5)
    '2.5'
    """
    d = to_decimal(value)
    if d == d.to_integral_value():
        return str(d.quantize(Decimal(1)))
    return format(d.normalize(), "f")


def format_length(value: Number, unit: str = "cm") -> str:
    return f"{format_decimal(value)}{unit}"

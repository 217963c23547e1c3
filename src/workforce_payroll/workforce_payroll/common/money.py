from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable

from ..core.constants import MONEY_QUANTUM


def to_decimal(value: Any) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def money(value: Any) -> Decimal:
    """Quantise to cents, half-up."""
    return to_decimal(value).quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def percent_of(base: Decimal, rate: Any) -> Decimal:
    return money(to_decimal(base) * to_decimal(rate) / Decimal("100"))


def total(values: Iterable[Decimal]) -> Decimal:
    return money(sum(values, Decimal("0")))

"""Rounding helpers shared by the calculators."""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Optional

from finance_engine.config.settings import get_settings
from finance_engine.domain.errors import InvalidArgument


def _quantize(value: float, places: int) -> Decimal:
    if not math.isfinite(value):
        raise InvalidArgument([f"result {value!r} is out of range"])
    # str() gives the shortest repr, so 1.005 rounds to 1.01 instead of 1.00
    exponent = Decimal(1).scaleb(-places)
    try:
        return Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise InvalidArgument([f"result {value!r} is out of range"]) from None


def to_cents(value: float, places: Optional[int] = None) -> Decimal:
    """Exact decimal form of a currency figure at the configured precision."""
    if places is None:
        places = get_settings().money_places
    return _quantize(value, places)


def round_money(value: float, places: Optional[int] = None) -> float:
    """Round half away from zero to the configured currency precision."""
    rounded = float(to_cents(value, places))
    return rounded + 0.0  # normalise -0.0


def round_percentage(value: float, places: Optional[int] = None) -> float:
    if places is None:
        places = get_settings().percentage_places
    return float(_quantize(value, places)) + 0.0

"""
Time-value-of-money primitives.

Every function here works in full float precision; rounding is left to the
calculators. Rates are per period and expressed as fractions.
"""

from __future__ import annotations

import math
from typing import Optional

from finance_engine.domain.errors import DivisionDegenerate, InvalidArgument


def ratio(numerator: float, denominator: float, *, when_zero: Optional[float] = None) -> float:
    """Divide, returning ``when_zero`` for a zero denominator if one is given."""
    if denominator == 0:
        if when_zero is None:
            raise DivisionDegenerate(f"cannot divide {numerator!r} by zero")
        return when_zero
    return numerator / denominator


def _out_of_range(rate: float, periods: int) -> InvalidArgument:
    return InvalidArgument([f"growth at rate {rate!r} over {periods} periods is out of range"])


def growth_factor(rate: float, periods: int) -> float:
    """(1 + rate) ** periods"""
    try:
        return (1.0 + rate) ** periods
    except OverflowError:
        raise _out_of_range(rate, periods) from None


def growth_term(rate: float, periods: int) -> float:
    """
    (1 + rate) ** periods - 1, accurate for rates close to zero.

    ``1.0 + 1e-17`` is exactly 1.0 in floating point, so the naive form
    loses small rates entirely.
    """
    if rate <= -1:
        return growth_factor(rate, periods) - 1.0
    try:
        return math.expm1(periods * math.log1p(rate))
    except OverflowError:
        raise _out_of_range(rate, periods) from None


def annuity_factor(rate: float, periods: int, *, due: bool = False) -> float:
    """
    Future value of a payment of 1 made every period.

    ``due=True`` puts payments at the start of each period (annuity-due), which
    gives every payment one extra period of growth. A zero rate degenerates to
    the plain payment count.
    """
    term = growth_term(rate, periods) if rate else 0.0
    if term == 0:
        return float(periods)
    factor = term / rate
    if due:
        factor *= 1.0 + rate
    return factor


def annuity_payment(principal: float, rate: float, periods: int) -> float:
    """Level payment that retires ``principal`` over ``periods`` at ``rate``."""
    term = growth_term(rate, periods) if rate else 0.0
    if term == 0:
        return ratio(principal, periods)
    return principal * rate * (term + 1.0) / term

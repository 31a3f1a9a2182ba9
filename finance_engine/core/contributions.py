"""Contribution normalization."""

from __future__ import annotations

from typing import Dict

from finance_engine.core.annuity import ratio

# contribution events per year for each frequency the client offers
PAYMENTS_PER_YEAR: Dict[str, int] = {
    "monthly": 12,
    "quarterly": 4,
    "annually": 1,
}


def normalize_contribution(amount: float, contribution_frequency: str, compound_frequency: int) -> float:
    """
    Convert a contribution into the amount added per compounding period.

    ``amount`` is expressed per ``contribution_frequency`` interval. The
    result keeps the yearly total unchanged: 300 a quarter with monthly
    compounding becomes 100 per period. ``per_period`` passes through.
    """
    if contribution_frequency == "per_period":
        return amount
    try:
        payments = PAYMENTS_PER_YEAR[contribution_frequency]
    except KeyError:
        raise ValueError(f"unknown contribution frequency {contribution_frequency!r}") from None
    return ratio(amount * payments, compound_frequency)

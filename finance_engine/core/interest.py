"""Compound and simple interest."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Tuple, Union

from finance_engine.core.annuity import annuity_factor, growth_factor
from finance_engine.core.contributions import normalize_contribution
from finance_engine.core.money import round_money
from finance_engine.core.requests import as_request
from finance_engine.schemas.interest import (
    InterestGrowthPoint,
    InterestRequest,
    InterestResult,
)

logger = logging.getLogger(__name__)


def _future_value(request: InterestRequest, years: int) -> Tuple[float, float]:
    """Return (final amount, total contributed) after ``years`` at full precision."""
    if request.calculation_type == "simple":
        interest = request.principal * request.annual_rate * years
        return request.principal + interest, request.principal

    periodic_rate = request.annual_rate / request.compound_frequency
    total_periods = request.compound_frequency * years
    contribution = normalize_contribution(
        request.contribution,
        request.contribution_frequency,
        request.compound_frequency,
    )
    contributed = contribution * total_periods

    if periodic_rate == 0:
        return request.principal + contributed, request.principal + contributed

    final_amount = request.principal * growth_factor(periodic_rate, total_periods)
    if contribution:
        due = request.contribution_timing == "start"
        final_amount += contribution * annuity_factor(periodic_rate, total_periods, due=due)
    return final_amount, request.principal + contributed


def compute_interest(request: Union[InterestRequest, Mapping[str, Any]]) -> InterestResult:
    """
    Project an investment forward.

    Simple interest accrues on the principal only. Compound interest applies
    ``annual_rate / compound_frequency`` every period and adds the regular
    contribution either at the start (annuity-due) or the end of each period.
    """
    request = as_request(InterestRequest, request)
    final_amount, contributed = _future_value(request, request.years)
    interest_earned = final_amount - contributed

    logger.debug(
        "%s interest: principal=%s rate=%s years=%s -> %s",
        request.calculation_type,
        request.principal,
        request.annual_rate,
        request.years,
        final_amount,
    )
    return InterestResult(
        final_amount=round_money(final_amount),
        interest_earned=round_money(interest_earned),
        total_contributions=round_money(contributed),
    )


def compute_interest_growth(request: Union[InterestRequest, Mapping[str, Any]]) -> List[InterestGrowthPoint]:
    """Year-by-year balances from year 0 through ``request.years``."""
    request = as_request(InterestRequest, request)

    points: List[InterestGrowthPoint] = []
    for year in range(request.years + 1):
        balance, contributed = _future_value(request, year)
        points.append(
            InterestGrowthPoint(
                year=year,
                balance=round_money(balance),
                total_contributions=round_money(contributed),
                interest=round_money(balance - contributed),
            )
        )
    return points

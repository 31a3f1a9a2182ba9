"""Retirement savings projection."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from finance_engine.core.annuity import annuity_factor, growth_factor, ratio
from finance_engine.core.money import round_money
from finance_engine.core.requests import as_request
from finance_engine.schemas.retirement import (
    RetirementRequest,
    RetirementResult,
    RetirementYearPoint,
)

logger = logging.getLogger(__name__)

# share of savings that can be withdrawn in the first year of retirement
SAFE_WITHDRAWAL_RATE = 0.04


def _income_gap(request: RetirementRequest, years: int) -> float:
    """Yearly income savings must cover, inflated ``years`` into the future."""
    inflation = growth_factor(request.inflation_rate, years)
    return (request.desired_annual_income - request.expected_annual_other_income) * inflation


def compute_retirement_plan(request: Union[RetirementRequest, Mapping[str, Any]]) -> RetirementResult:
    """
    Compare projected savings at retirement with what the 4% rule requires.

    Current savings compound yearly at ``annual_return``; monthly
    contributions compound monthly and are made at the start of each month.
    When savings fall short, the suggested contribution adds whatever extra
    monthly amount closes the gap over the same months.
    """
    request = as_request(RetirementRequest, request)

    years = request.years_to_retirement
    months = years * 12
    monthly_rate = request.annual_return / 12
    contribution_factor = annuity_factor(monthly_rate, months, due=True)

    projected = (
        request.current_savings * growth_factor(request.annual_return, years)
        + request.monthly_contribution * contribution_factor
    )
    required = _income_gap(request, years) / SAFE_WITHDRAWAL_RATE
    shortfall = max(0.0, required - projected)

    additional = 0.0
    if shortfall > 0:
        additional = ratio(shortfall, contribution_factor)

    logger.debug(
        "retirement plan: years=%s projected=%s required=%s shortfall=%s",
        years,
        projected,
        required,
        shortfall,
    )
    return RetirementResult(
        total_savings_at_retirement=round_money(projected),
        required_savings=round_money(required),
        shortfall=round_money(shortfall),
        current_monthly_contribution=round_money(request.monthly_contribution),
        suggested_monthly_contribution=round_money(request.monthly_contribution + additional),
        years_to_retirement=years,
        years_in_retirement=request.years_in_retirement,
    )


def project_retirement_balances(
    request: Union[RetirementRequest, Mapping[str, Any]],
) -> List[RetirementYearPoint]:
    """
    Build a year-by-year balance table from current_age to life_expectancy.

    Order of operations (per year):
      - Working years: record the balance, then grow it and add twelve
        months of contributions.
      - Retirement years: record the balance and this year's withdrawal
        (the income gap inflated from retirement), then take the
        withdrawal and grow what is left. The balance never goes negative.
    """
    request = as_request(RetirementRequest, request)

    savings = float(request.current_savings)
    contributed = float(request.current_savings)
    annual_contribution = request.monthly_contribution * 12

    points: List[RetirementYearPoint] = []
    for age in range(request.current_age, request.life_expectancy + 1):
        if age < request.retirement_age:
            points.append(
                RetirementYearPoint(
                    age=age,
                    savings=round_money(savings),
                    total_contributions=round_money(contributed),
                    withdrawal=0.0,
                )
            )
            savings = savings * (1 + request.annual_return) + annual_contribution
            contributed += annual_contribution
        else:
            withdrawal = _income_gap(request, age - request.retirement_age)
            points.append(
                RetirementYearPoint(
                    age=age,
                    savings=round_money(max(0.0, savings)),
                    total_contributions=round_money(contributed),
                    withdrawal=round_money(withdrawal),
                )
            )
            savings = max(0.0, (savings - withdrawal) * (1 + request.annual_return))

    return points

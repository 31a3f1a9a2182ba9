"""Emergency fund sizing."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from finance_engine.core.annuity import ratio
from finance_engine.core.money import round_money, round_percentage
from finance_engine.core.requests import as_request
from finance_engine.schemas.emergency_fund import (
    EmergencyFundRequest,
    EmergencyFundResult,
    ExpenseBreakdown,
    FundingStatus,
)

logger = logging.getLogger(__name__)

Expenses = Union[float, ExpenseBreakdown, Mapping[str, Any]]


def funding_status(percentage: float) -> FundingStatus:
    if percentage < 25:
        return "critical"
    if percentage < 50:
        return "low"
    if percentage < 75:
        return "moderate"
    return "funded"


def _monthly_total(monthly_expenses: Expenses) -> Any:
    if isinstance(monthly_expenses, ExpenseBreakdown):
        return monthly_expenses.total
    if isinstance(monthly_expenses, Mapping):
        return as_request(ExpenseBreakdown, monthly_expenses).total
    return monthly_expenses


def compute_emergency_fund(
    monthly_expenses: Expenses,
    desired_months: int,
    current_savings: float = 0.0,
) -> EmergencyFundResult:
    """
    Size an emergency fund as a number of months of expenses.

    ``monthly_expenses`` is either a single figure or an expense breakdown
    whose lines are summed. Nothing to cover counts as fully funded.
    """
    request = as_request(
        EmergencyFundRequest,
        {
            "monthly_expenses": _monthly_total(monthly_expenses),
            "desired_months_coverage": desired_months,
            "current_savings": current_savings,
        },
    )

    required = request.monthly_expenses * request.desired_months_coverage
    shortfall = max(0.0, required - request.current_savings)
    percentage = min(100.0, ratio(request.current_savings * 100, required, when_zero=100.0))

    rounded_percentage = round_percentage(percentage)

    logger.debug("emergency fund: required=%s funded=%s%%", required, percentage)
    return EmergencyFundResult(
        monthly_expenses=round_money(request.monthly_expenses),
        required_fund=round_money(required),
        current_savings=round_money(request.current_savings),
        shortfall=round_money(shortfall),
        funding_percentage=rounded_percentage,
        funding_status=funding_status(rounded_percentage),
    )

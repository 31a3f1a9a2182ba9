"""Workplace pension simulation."""

from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from finance_engine.core.money import round_money
from finance_engine.core.requests import as_request
from finance_engine.schemas.pension import PensionRequest, PensionResult, PensionYear

logger = logging.getLogger(__name__)


def employer_rate(employee_pct: float, match_pct: float) -> float:
    """The employer matches at most the employee's own contribution rate."""
    return min(employee_pct, match_pct)


def compute_pension_projection(request: Union[PensionRequest, Mapping[str, Any]]) -> PensionResult:
    """
    Simulate a defined-contribution pension until retirement.

    Each year the return is earned on the balance carried in from the
    previous year, then both contributions are added. The salary rises after
    the year's contributions are taken.
    """
    request = as_request(PensionRequest, request)

    employee_share = request.employee_contribution_pct / 100
    employer_share = employer_rate(request.employee_contribution_pct, request.employer_match_pct) / 100
    return_rate = request.annual_return_pct / 100
    salary_growth = request.annual_salary_growth_pct / 100

    salary = float(request.current_salary)
    pension_value = float(request.current_pension_value)
    total_employee = total_employer = total_returns = 0.0

    yearly: List[PensionYear] = []
    for year in range(1, request.retirement_age - request.current_age + 1):
        employee_contribution = salary * employee_share
        employer_contribution = salary * employer_share
        investment_return = pension_value * return_rate
        pension_value += employee_contribution + employer_contribution + investment_return

        total_employee += employee_contribution
        total_employer += employer_contribution
        total_returns += investment_return

        yearly.append(
            PensionYear(
                age=request.current_age + year,
                salary=round_money(salary),
                employee_contribution=round_money(employee_contribution),
                employer_contribution=round_money(employer_contribution),
                investment_return=round_money(investment_return),
                pension_value=round_money(pension_value),
            )
        )
        salary *= 1 + salary_growth

    logger.debug("pension projection: years=%s final=%s", len(yearly), pension_value)
    return PensionResult(
        final_pension_value=round_money(pension_value),
        total_employee_contributions=round_money(total_employee),
        total_employer_contributions=round_money(total_employer),
        total_investment_returns=round_money(total_returns),
        yearly=yearly,
    )

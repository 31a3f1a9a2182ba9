"""Calculators and the arithmetic they share."""

from finance_engine.core.contributions import normalize_contribution
from finance_engine.core.dispatch import run_calculation
from finance_engine.core.emergency_fund import compute_emergency_fund
from finance_engine.core.interest import compute_interest, compute_interest_growth
from finance_engine.core.loan import compute_loan_schedule, monthly_payment
from finance_engine.core.money import round_money
from finance_engine.core.net_worth import compute_net_worth
from finance_engine.core.pension import compute_pension_projection
from finance_engine.core.retirement import (
    SAFE_WITHDRAWAL_RATE,
    compute_retirement_plan,
    project_retirement_balances,
)

__all__ = [
    "SAFE_WITHDRAWAL_RATE",
    "compute_emergency_fund",
    "compute_interest",
    "compute_interest_growth",
    "compute_loan_schedule",
    "compute_net_worth",
    "compute_pension_projection",
    "compute_retirement_plan",
    "monthly_payment",
    "normalize_contribution",
    "project_retirement_balances",
    "round_money",
    "run_calculation",
]

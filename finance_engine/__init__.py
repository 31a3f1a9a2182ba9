"""Financial projection engine: pure calculators for a personal-finance app."""

from finance_engine.core import (
    compute_emergency_fund,
    compute_interest,
    compute_interest_growth,
    compute_loan_schedule,
    compute_net_worth,
    compute_pension_projection,
    compute_retirement_plan,
    project_retirement_balances,
    run_calculation,
)
from finance_engine.domain.errors import (
    DivisionDegenerate,
    FinanceEngineError,
    InvalidArgument,
)

__all__ = [
    "DivisionDegenerate",
    "FinanceEngineError",
    "InvalidArgument",
    "compute_emergency_fund",
    "compute_interest",
    "compute_interest_growth",
    "compute_loan_schedule",
    "compute_net_worth",
    "compute_pension_projection",
    "compute_retirement_plan",
    "project_retirement_balances",
    "run_calculation",
]

"""Data contracts for loan amortization."""

from typing import List

from pydantic import Field

from finance_engine.schemas.base import EngineModel


class LoanRequest(EngineModel):
    principal: float = Field(..., gt=0, description="Amount borrowed.")
    annual_rate: float = Field(..., ge=0, description="Annual rate as a decimal.")
    term_years: int = Field(..., gt=0, description="Loan term in years.")


class AmortizationEntry(EngineModel):
    """One monthly payment of an amortization schedule."""

    payment_index: int = Field(..., ge=1)
    principal_portion: float = Field(..., ge=0)
    interest_portion: float = Field(..., ge=0)
    cumulative_interest: float = Field(..., ge=0)
    remaining_balance: float = Field(..., ge=0)


class LoanResult(EngineModel):
    monthly_payment: float
    total_interest: float
    total_cost: float
    schedule: List[AmortizationEntry]

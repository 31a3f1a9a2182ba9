"""Data contracts for emergency fund sizing."""

from typing import Literal

from pydantic import Field

from finance_engine.schemas.base import EngineModel

FundingStatus = Literal["critical", "low", "moderate", "funded"]


class ExpenseBreakdown(EngineModel):
    """Monthly expenses by line, as collected by the calculator form."""

    housing: float = Field(0.0, ge=0)
    utilities: float = Field(0.0, ge=0)
    food: float = Field(0.0, ge=0)
    transportation: float = Field(0.0, ge=0)
    healthcare: float = Field(0.0, ge=0)
    debt_payments: float = Field(0.0, ge=0)
    other: float = Field(0.0, ge=0)

    @property
    def total(self) -> float:
        return (
            self.housing
            + self.utilities
            + self.food
            + self.transportation
            + self.healthcare
            + self.debt_payments
            + self.other
        )


class EmergencyFundRequest(EngineModel):
    monthly_expenses: float = Field(..., ge=0)
    desired_months_coverage: int = Field(..., gt=0)
    current_savings: float = Field(0.0, ge=0)


class EmergencyFundResult(EngineModel):
    monthly_expenses: float
    required_fund: float
    current_savings: float
    shortfall: float = Field(..., ge=0)
    funding_percentage: float = Field(..., ge=0, le=100)
    funding_status: FundingStatus

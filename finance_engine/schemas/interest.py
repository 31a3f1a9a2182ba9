"""Data contracts for the compound/simple interest calculator."""

from typing import List, Literal

from pydantic import Field

from finance_engine.schemas.base import EngineModel

CalculationKind = Literal["compound", "simple"]
ContributionTiming = Literal["start", "end"]
ContributionFrequency = Literal["per_period", "monthly", "quarterly", "annually"]


class InterestRequest(EngineModel):
    """Inputs for an interest projection."""

    principal: float = Field(..., ge=0, description="Amount invested at period 0.")
    annual_rate: float = Field(
        ...,
        description="Annual interest rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    years: int = Field(..., ge=0, description="Number of whole years to project.")
    compound_frequency: int = Field(1, ge=1, description="Compounding periods per year.")
    contribution: float = Field(0.0, ge=0, description="Regular contribution amount.")
    contribution_timing: ContributionTiming = Field(
        "end",
        description="Whether contributions land at the start or the end of a period.",
    )
    contribution_frequency: ContributionFrequency = Field(
        "per_period",
        description="Interval the contribution amount is expressed in.",
    )
    calculation_type: CalculationKind = "compound"


class InterestResult(EngineModel):
    final_amount: float
    interest_earned: float
    total_contributions: float


class InterestGrowthPoint(EngineModel):
    """Balance at the end of a given year."""

    year: int = Field(..., ge=0)
    balance: float
    total_contributions: float
    interest: float

"""Data contracts for retirement planning."""

from __future__ import annotations

from pydantic import Field, model_validator

from finance_engine.schemas.base import EngineModel


class RetirementRequest(EngineModel):
    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., ge=0, le=120)
    life_expectancy: int = Field(..., ge=0, le=130)
    current_savings: float = Field(0.0, ge=0)
    monthly_contribution: float = Field(0.0, ge=0)
    annual_return: float = Field(..., gt=-1, description="Expected annual return as a decimal.")
    inflation_rate: float = Field(0.0, gt=-1, description="Expected inflation as a decimal.")
    desired_annual_income: float = Field(..., ge=0, description="Income wanted in retirement, in today's money.")
    expected_annual_other_income: float = Field(
        0.0,
        ge=0,
        description="Other yearly income in retirement (e.g. social security), in today's money.",
    )

    @model_validator(mode="after")
    def ensure_validity(self) -> "RetirementRequest":
        if self.current_age >= self.retirement_age:
            raise ValueError("retirement_age must be greater than current_age")
        if self.retirement_age > self.life_expectancy:
            raise ValueError("life_expectancy must be at least retirement_age")
        return self

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def years_in_retirement(self) -> int:
        return self.life_expectancy - self.retirement_age


class RetirementResult(EngineModel):
    total_savings_at_retirement: float
    required_savings: float
    shortfall: float = Field(..., ge=0)
    current_monthly_contribution: float
    suggested_monthly_contribution: float
    years_to_retirement: int
    years_in_retirement: int


class RetirementYearPoint(EngineModel):
    """Start-of-year balance at a given age; withdrawal is zero before retirement."""

    age: int
    savings: float = Field(..., ge=0)
    total_contributions: float
    withdrawal: float

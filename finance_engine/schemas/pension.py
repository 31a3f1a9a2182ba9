"""Data contracts for the pension simulator. Percentages are given as 8 for 8%."""

from __future__ import annotations

from typing import List

from pydantic import Field, model_validator

from finance_engine.schemas.base import EngineModel


class PensionRequest(EngineModel):
    current_salary: float = Field(..., ge=0)
    employee_contribution_pct: float = Field(..., ge=0, le=100)
    employer_match_pct: float = Field(0.0, ge=0, le=100)
    annual_salary_growth_pct: float = Field(0.0, gt=-100)
    annual_return_pct: float = Field(..., gt=-100)
    current_age: int = Field(..., ge=0, le=120)
    retirement_age: int = Field(..., ge=0, le=120)
    current_pension_value: float = Field(0.0, ge=0)

    @model_validator(mode="after")
    def ensure_validity(self) -> "PensionRequest":
        if self.retirement_age <= self.current_age:
            raise ValueError("retirement_age must be greater than current_age")
        return self


class PensionYear(EngineModel):
    age: int
    salary: float
    employee_contribution: float
    employer_contribution: float
    investment_return: float
    pension_value: float


class PensionResult(EngineModel):
    final_pension_value: float
    total_employee_contributions: float
    total_employer_contributions: float
    total_investment_returns: float
    yearly: List[PensionYear]

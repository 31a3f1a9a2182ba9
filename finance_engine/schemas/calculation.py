"""Record handed to the persistence collaborator."""

from enum import Enum
from typing import Any, Dict

from pydantic import Field

from finance_engine.schemas.base import EngineModel


class CalculationType(str, Enum):
    INTEREST = "interest"
    NET_WORTH = "netWorth"
    PENSION = "pension"
    RETIREMENT = "retirement"
    LOAN = "loan"
    EMERGENCY_FUND = "emergencyFund"


class CalculationRecord(EngineModel):
    type: CalculationType
    title: str = Field(..., min_length=1)
    parameters: Dict[str, Any]
    results: Dict[str, Any]

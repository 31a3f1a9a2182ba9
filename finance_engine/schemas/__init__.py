"""Request and result models for every calculator."""

from finance_engine.schemas.calculation import CalculationRecord, CalculationType
from finance_engine.schemas.emergency_fund import (
    EmergencyFundRequest,
    EmergencyFundResult,
    ExpenseBreakdown,
)
from finance_engine.schemas.interest import (
    InterestGrowthPoint,
    InterestRequest,
    InterestResult,
)
from finance_engine.schemas.loan import AmortizationEntry, LoanRequest, LoanResult
from finance_engine.schemas.net_worth import (
    ASSET_CATEGORIES,
    LIABILITY_CATEGORIES,
    AssetItem,
    LiabilityItem,
    NetWorthRequest,
    NetWorthResult,
)
from finance_engine.schemas.pension import PensionRequest, PensionResult, PensionYear
from finance_engine.schemas.retirement import (
    RetirementRequest,
    RetirementResult,
    RetirementYearPoint,
)

__all__ = [
    "ASSET_CATEGORIES",
    "LIABILITY_CATEGORIES",
    "AmortizationEntry",
    "AssetItem",
    "CalculationRecord",
    "CalculationType",
    "EmergencyFundRequest",
    "EmergencyFundResult",
    "ExpenseBreakdown",
    "InterestGrowthPoint",
    "InterestRequest",
    "InterestResult",
    "LiabilityItem",
    "LoanRequest",
    "LoanResult",
    "NetWorthRequest",
    "NetWorthResult",
    "PensionRequest",
    "PensionResult",
    "PensionYear",
    "RetirementRequest",
    "RetirementResult",
    "RetirementYearPoint",
]

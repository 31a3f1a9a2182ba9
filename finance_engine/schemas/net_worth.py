"""Data contracts for net worth aggregation."""

from typing import Dict, List, Optional

from pydantic import Field

from finance_engine.schemas.base import EngineModel

ASSET_CATEGORIES = (
    "Cash & Bank Accounts",
    "Investments",
    "Real Estate",
    "Vehicles",
    "Personal Property",
    "Business Interests",
    "Other Assets",
)

LIABILITY_CATEGORIES = (
    "Mortgages",
    "Car Loans",
    "Student Loans",
    "Credit Cards",
    "Personal Loans",
    "Medical Debt",
    "Other Debts",
)


class BalanceItem(EngineModel):
    name: str = ""
    # blank categories are filed under the configured default at aggregation time
    category: Optional[str] = None
    value: float = Field(..., ge=0)


class AssetItem(BalanceItem):
    pass


class LiabilityItem(BalanceItem):
    pass


class NetWorthRequest(EngineModel):
    assets: List[AssetItem] = Field(default_factory=list)
    liabilities: List[LiabilityItem] = Field(default_factory=list)


class NetWorthResult(EngineModel):
    total_assets: float
    total_liabilities: float
    net_worth: float
    assets_by_category: Dict[str, float]
    liabilities_by_category: Dict[str, float]

from __future__ import annotations

import pytest

from finance_engine.core.net_worth import compute_net_worth
from finance_engine.domain.errors import InvalidArgument
from finance_engine.schemas.net_worth import ASSET_CATEGORIES, AssetItem, LiabilityItem


def test_single_asset_and_liability():
    result = compute_net_worth(
        [{"name": "Checking", "value": 100_000, "category": "Cash"}],
        [{"name": "Car", "value": 20_000, "category": "Loans"}],
    )

    assert result.total_assets == 100_000.0
    assert result.total_liabilities == 20_000.0
    assert result.net_worth == 80_000.0
    assert result.assets_by_category == {"Cash": 100_000.0}
    assert result.liabilities_by_category == {"Loans": 20_000.0}


def test_items_are_grouped_by_category():
    result = compute_net_worth(
        [
            AssetItem(name="Brokerage", category="Investments", value=12_000.25),
            AssetItem(name="401k", category="Investments", value=30_000.50),
            AssetItem(name="House", category="Real Estate", value=250_000),
        ],
        [
            LiabilityItem(name="Mortgage", category="Mortgages", value=180_000),
            LiabilityItem(name="Visa", category="Credit Cards", value=1_200.10),
            LiabilityItem(name="Amex", category="Credit Cards", value=800.40),
        ],
    )

    assert result.assets_by_category == {"Investments": 42_000.75, "Real Estate": 250_000.0}
    assert result.liabilities_by_category == {"Mortgages": 180_000.0, "Credit Cards": 2_000.5}
    assert result.net_worth == 110_000.25


def test_missing_category_falls_back_to_other():
    result = compute_net_worth([{"name": "Cash jar", "value": 50}, {"name": "Coins", "category": "  ", "value": 25}])

    assert result.assets_by_category == {"Other": 75.0}
    assert result.liabilities_by_category == {}


def test_net_worth_may_be_negative():
    result = compute_net_worth(
        [{"value": 5_000, "category": ASSET_CATEGORIES[0]}],
        [{"value": 45_000, "category": "Student Loans"}],
    )

    assert result.net_worth == -40_000.0


def test_empty_statement():
    result = compute_net_worth()

    assert result.total_assets == 0.0
    assert result.net_worth == 0.0


def test_negative_values_are_rejected():
    with pytest.raises(InvalidArgument):
        compute_net_worth([{"name": "Bad", "value": -1}])

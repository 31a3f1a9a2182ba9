"""Net worth aggregation."""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import Any, Dict, Iterable, Mapping, Sequence, Union

from finance_engine.config.settings import get_settings
from finance_engine.core.money import round_money
from finance_engine.core.requests import as_request
from finance_engine.schemas.net_worth import (
    AssetItem,
    BalanceItem,
    LiabilityItem,
    NetWorthRequest,
    NetWorthResult,
)

logger = logging.getLogger(__name__)


def _by_category(items: Iterable[BalanceItem]) -> Dict[str, float]:
    default = get_settings().default_category
    totals: Dict[str, float] = defaultdict(float)
    for item in items:
        category = (item.category or "").strip() or default
        totals[category] += item.value
    return {category: round_money(value) for category, value in totals.items()}


def compute_net_worth(
    assets: Sequence[Union[AssetItem, Mapping[str, Any]]] = (),
    liabilities: Sequence[Union[LiabilityItem, Mapping[str, Any]]] = (),
) -> NetWorthResult:
    """Total assets minus total liabilities, with per-category subtotals."""
    request = as_request(
        NetWorthRequest,
        {
            "assets": [_plain(item) for item in assets],
            "liabilities": [_plain(item) for item in liabilities],
        },
    )

    total_assets = sum(item.value for item in request.assets)
    total_liabilities = sum(item.value for item in request.liabilities)
    net_worth = total_assets - total_liabilities

    logger.debug(
        "net worth: %s assets, %s liabilities -> %s",
        len(request.assets),
        len(request.liabilities),
        net_worth,
    )
    return NetWorthResult(
        total_assets=round_money(total_assets),
        total_liabilities=round_money(total_liabilities),
        net_worth=round_money(net_worth),
        assets_by_category=_by_category(request.assets),
        liabilities_by_category=_by_category(request.liabilities),
    )


def _plain(item: Union[BalanceItem, Mapping[str, Any]]) -> Mapping[str, Any]:
    if isinstance(item, BalanceItem):
        return item.model_dump()
    return item

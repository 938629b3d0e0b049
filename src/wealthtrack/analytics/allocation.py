"""Portfolio composition by asset type, currency and risk level."""

from collections import defaultdict
from decimal import Decimal
from typing import Callable, Hashable, Sequence

from wealthtrack.analytics.stats import herfindahl_index
from wealthtrack.domain.models.analytics import (
    AllocationAnalytics,
    AssetTypeAllocation,
    CurrencyAllocation,
    RiskLevelAllocation,
)
from wealthtrack.domain.models.portfolio import Holding


def _total(holdings: Sequence[Holding]) -> Decimal:
    return sum((h.value for h in holdings), Decimal(0))


def _group(holdings: Sequence[Holding], key: Callable[[Holding], Hashable]) -> list[tuple[Hashable, list[Holding]]]:
    """Group holdings, largest total value first (ties by key) so input order never matters."""
    groups: dict[Hashable, list[Holding]] = defaultdict(list)
    for h in holdings:
        groups[key(h)].append(h)
    return sorted(groups.items(), key=lambda kv: (-_total(kv[1]), str(kv[0])))


def _percentage(value: Decimal, total_value: Decimal) -> float:
    return float(value / total_value * 100) if total_value != 0 else 0.0


def _average_unrealized_return(holdings: list[Holding]) -> float:
    returns = [float((h.value - h.cost_basis) / h.cost_basis * 100) if h.cost_basis else 0.0 for h in holdings]
    return sum(returns) / len(returns) if returns else 0.0


def diversification_score(holdings: Sequence[Holding]) -> float:
    """1 - HHI of asset-type shares, normalized to [0, 100] over the observed types.

    0 means everything sits in one asset type (or there is nothing to
    measure), 100 an even split across every type present.
    """
    type_values: dict[Hashable, Decimal] = defaultdict(Decimal)
    for h in holdings:
        type_values[h.asset_type] += h.value
    n = len(type_values)
    if n < 2:
        return 0.0
    hhi = herfindahl_index(sorted(type_values.values()))
    if hhi == 0:
        return 0.0
    score = (1 - hhi) / (1 - 1 / n) * 100
    return min(max(score, 0.0), 100.0)


def aggregate_allocation(holdings: Sequence[Holding]) -> AllocationAnalytics:
    total_value = _total(holdings)

    by_asset_type = []
    for asset_type, members in _group(holdings, lambda h: h.asset_type):
        value = _total(members)
        by_asset_type.append(AssetTypeAllocation(
            asset_type=asset_type,
            value=value,
            percentage=_percentage(value, total_value),
            count=len(members),
            average_return=_average_unrealized_return(members),
        ))

    by_currency = []
    for currency, members in _group(holdings, lambda h: h.currency):
        value = _total(members)
        by_currency.append(CurrencyAllocation(
            currency=currency,
            value=value,
            percentage=_percentage(value, total_value),
            count=len(members),
        ))

    by_risk_level = []
    for risk_level, members in _group(holdings, lambda h: h.effective_risk_level):
        value = _total(members)
        by_risk_level.append(RiskLevelAllocation(
            risk_level=risk_level,
            value=value,
            percentage=_percentage(value, total_value),
            count=len(members),
        ))

    return AllocationAnalytics(
        by_asset_type=by_asset_type,
        by_currency=by_currency,
        by_risk_level=by_risk_level,
        diversification_score=diversification_score(holdings),
    )

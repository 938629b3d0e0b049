"""After-tax performance of the portfolio and of its individual assets."""

import sys
from collections import defaultdict
from decimal import Decimal
from typing import Sequence

from wealthtrack.analytics.stats import max_drawdown_percent, population_std
from wealthtrack.analytics.tax_evaluator import evaluate_event
from wealthtrack.analytics.trend import ordered_history
from wealthtrack.domain.models.analytics import AssetPerformance, PerformanceAnalytics
from wealthtrack.domain.models.base import as_decimal
from wealthtrack.domain.models.portfolio import Holding, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings

DAYS_PER_YEAR = 365
# Annualizing a large gain over a few days overflows a float; JSON has no infinity
MAX_ANNUALIZED_RETURN = sys.float_info.max


def annualize(total_return_percent: float, period_days: int, days_per_year: int = DAYS_PER_YEAR) -> float:
    """Compound a period return to a yearly basis, in percent.

    A non-positive period falls back to the period return itself; a loss of
    100% or more stays at -100, and overflow is capped at MAX_ANNUALIZED_RETURN.
    """
    if period_days <= 0:
        return total_return_percent
    growth = 1 + total_return_percent / 100
    if growth <= 0:
        return -100.0
    try:
        annualized = (growth ** (days_per_year / period_days) - 1) * 100
    except OverflowError:
        return MAX_ANNUALIZED_RETURN
    return min(annualized, MAX_ANNUALIZED_RETURN)


def _asset_performance(holding: Holding, after_tax_return: Decimal) -> AssetPerformance:
    return_pct = float(after_tax_return / holding.cost_basis * 100) if holding.cost_basis else 0.0
    return AssetPerformance(
        asset_id=holding.asset_id,
        name=holding.name,
        asset_type=holding.asset_type,
        value=holding.value,
        return_amount=after_tax_return,
        return_percent=return_pct,
    )


def sharpe_ratio(returns: Sequence[float], risk_free_rate: float = 0.0) -> float:
    """Mean excess return over population standard deviation; 0 when flat or empty."""
    std = population_std(returns)
    if std == 0:
        return 0.0
    return (sum(returns) / len(returns) - risk_free_rate) / std


def aggregate_performance(
    holdings: Sequence[Holding],
    profit_events: Sequence[ProfitEvent],
    start_value: Decimal | float,
    end_value: Decimal | float,
    period_days: int,
    *,
    tax_settings: TaxSettings | None = None,
    valuation_history: Sequence[ValuationPoint] = (),
    days_per_year: int = DAYS_PER_YEAR,
    risk_free_rate: float = 0.0,
) -> PerformanceAnalytics:
    """Fold tax-evaluated profit events and holdings into PerformanceAnalytics.

    Events without a matching holding still count towards total return and
    win rate, but cannot be best or worst asset.
    """
    results = [(event, evaluate_event(event, tax_settings)) for event in profit_events]

    total_return = sum((r.net_profit for _, r in results), Decimal(0))
    per_asset: dict[str, Decimal] = defaultdict(Decimal)
    for event, result in results:
        if event.asset_id is not None:
            per_asset[event.asset_id] += result.net_profit

    performances = [_asset_performance(h, per_asset[h.asset_id]) for h in holdings if h.asset_id in per_asset]
    best = max(performances, key=lambda p: (p.return_amount, abs(p.value)), default=None)
    worst = min(performances, key=lambda p: (p.return_amount, -abs(p.value)), default=None)

    start_value = as_decimal(start_value)
    total_return_pct = float(total_return / start_value * 100) if start_value != 0 else 0.0
    wins = sum(1 for _, r in results if r.net_profit > 0)
    history_values = [p.total_value for p in ordered_history(valuation_history)]

    return PerformanceAnalytics(
        total_return=total_return,
        total_return_percent=total_return_pct,
        annualized_return=annualize(total_return_pct, period_days, days_per_year),
        sharpe_ratio=sharpe_ratio([p.return_percent for p in performances], risk_free_rate),
        max_drawdown=max_drawdown_percent(history_values),
        win_rate=wins / len(results) if results else 0.0,
        best_asset=best,
        worst_asset=worst,
        start_value=start_value,
        end_value=as_decimal(end_value),
        period_days=period_days,
    )

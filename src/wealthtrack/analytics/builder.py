"""Compose the four aggregators into one PortfolioAnalytics snapshot.

Every input is an immutable snapshot passed in explicitly, so concurrent
computations for any number of users share nothing.
"""

import logging
from decimal import Decimal
from typing import Sequence

from wealthtrack.analytics.allocation import aggregate_allocation
from wealthtrack.analytics.performance import DAYS_PER_YEAR, aggregate_performance
from wealthtrack.analytics.risk import CVAR_MULTIPLIER, VAR_Z_SCORE, aggregate_risk
from wealthtrack.analytics.trend import aggregate_trends, ordered_history, to_utc
from wealthtrack.domain.models.analytics import PortfolioAnalytics
from wealthtrack.domain.models.portfolio import Holding, PortfolioSnapshot, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings

logger = logging.getLogger(__name__)


def performance_window(
    holdings: Sequence[Holding],
    valuation_history: Sequence[ValuationPoint],
) -> tuple[Decimal, Decimal, int]:
    """(start value, end value, period days) for the return calculation.

    Taken from the first and last valuation points; without history the
    holdings' cost basis and current value are used over a zero-day period.
    """
    history = ordered_history(valuation_history)
    if history:
        first, last = history[0], history[-1]
        period_days = (to_utc(last.timestamp) - to_utc(first.timestamp)).days
        return first.total_value, last.total_value, period_days
    start_value = sum((h.cost_basis for h in holdings), Decimal(0))
    end_value = sum((h.value for h in holdings), Decimal(0))
    return start_value, end_value, 0


def compute_portfolio_analytics(
    holdings: Sequence[Holding],
    valuation_history: Sequence[ValuationPoint],
    profit_events: Sequence[ProfitEvent],
    tax_settings: TaxSettings | None = None,
    benchmark_series: Sequence[float] | None = None,
    *,
    z_score: float = VAR_Z_SCORE,
    cvar_multiplier: float = CVAR_MULTIPLIER,
    days_per_year: int = DAYS_PER_YEAR,
    risk_free_rate: float = 0.0,
) -> PortfolioAnalytics:
    start_value, end_value, period_days = performance_window(holdings, valuation_history)

    performance = aggregate_performance(
        holdings,
        profit_events,
        start_value,
        end_value,
        period_days,
        tax_settings=tax_settings,
        valuation_history=valuation_history,
        days_per_year=days_per_year,
        risk_free_rate=risk_free_rate,
    )
    allocation = aggregate_allocation(holdings)
    trends = aggregate_trends(valuation_history, benchmark_series)
    risk_metrics = aggregate_risk(valuation_history, holdings, z_score=z_score, cvar_multiplier=cvar_multiplier)

    logger.debug(
        "Analytics over %d holdings, %d valuation points, %d profit events (%d days)",
        len(holdings), len(valuation_history), len(profit_events), period_days,
    )
    return PortfolioAnalytics(
        performance=performance,
        allocation=allocation,
        trends=trends,
        risk_metrics=risk_metrics,
    )


def compute_from_snapshot(
    snapshot: PortfolioSnapshot,
    benchmark_series: Sequence[float] | None = None,
    **constants,
) -> PortfolioAnalytics:
    return compute_portfolio_analytics(
        snapshot.holdings,
        snapshot.valuation_history,
        snapshot.profit_events,
        snapshot.tax_settings,
        benchmark_series,
        **constants,
    )

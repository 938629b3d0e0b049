"""Return series and volatility from the valuation history.

History is bucketed on UTC calendar boundaries; the last sample inside a
bucket is that period's closing value. The first bucket of every series has
no prior close and is emitted with a zero return so series lengths match
bucket counts.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Iterable, Sequence

from wealthtrack.analytics.stats import population_beta, population_std
from wealthtrack.domain.enums import Granularity
from wealthtrack.domain.models.analytics import DailyReturn, MonthlyReturn, TrendAnalytics, YearlyReturn
from wealthtrack.domain.models.portfolio import ValuationPoint


def to_utc(ts: datetime) -> datetime:
    """Naive timestamps are taken to be UTC already."""
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def ordered_history(history: Iterable[ValuationPoint]) -> list[ValuationPoint]:
    return sorted(history, key=lambda p: to_utc(p.timestamp))


def _bucket_key(ts: datetime, granularity: Granularity) -> date | str | int:
    if granularity == Granularity.DAILY:
        return ts.date()
    if granularity == Granularity.MONTHLY:
        return f"{ts.year:04d}-{ts.month:02d}"
    return ts.year


def bucket_returns(
    history: Iterable[ValuationPoint],
    granularity: Granularity,
) -> list[tuple[date | str | int, Decimal, Decimal, float]]:
    """(bucket, closing value, return, return percent) per calendar bucket, oldest first."""
    closes: dict[date | str | int, Decimal] = {}
    for point in ordered_history(history):
        closes[_bucket_key(to_utc(point.timestamp), granularity)] = point.total_value

    rows = []
    previous: Decimal | None = None
    for key, value in closes.items():
        if previous is None:
            change, change_pct = Decimal(0), 0.0
        else:
            change = value - previous
            change_pct = float(change / previous * 100) if previous != 0 else 0.0
        rows.append((key, value, change, change_pct))
        previous = value
    return rows


def daily_return_percents(history: Sequence[ValuationPoint]) -> list[float]:
    """Daily return percents, without the reference-less first bucket."""
    return [row[3] for row in bucket_returns(history, Granularity.DAILY)[1:]]


def volatility(history: Sequence[ValuationPoint]) -> float:
    """Population standard deviation of daily return percents."""
    return population_std(daily_return_percents(history))


def aggregate_trends(
    valuation_history: Sequence[ValuationPoint],
    benchmark_series: Sequence[float] | None = None,
) -> TrendAnalytics:
    """Daily/monthly/yearly return series plus volatility and beta.

    benchmark_series holds the benchmark's daily return percents, aligned on
    the most recent days; beta is 0 without one.
    """
    daily = [
        DailyReturn(day=key, value=value, return_amount=change, return_percent=pct)
        for key, value, change, pct in bucket_returns(valuation_history, Granularity.DAILY)
    ]
    monthly = [
        MonthlyReturn(month=key, value=value, return_amount=change, return_percent=pct)
        for key, value, change, pct in bucket_returns(valuation_history, Granularity.MONTHLY)
    ]
    yearly = [
        YearlyReturn(year=key, value=value, return_amount=change, return_percent=pct)
        for key, value, change, pct in bucket_returns(valuation_history, Granularity.YEARLY)
    ]

    daily_pcts = [r.return_percent for r in daily[1:]]
    beta = population_beta(daily_pcts, benchmark_series) if benchmark_series else 0.0

    return TrendAnalytics(
        daily_returns=daily,
        monthly_returns=monthly,
        yearly_returns=yearly,
        volatility=population_std(daily_pcts),
        beta=beta,
    )

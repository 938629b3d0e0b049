"""Output records of the portfolio analytics pipeline."""

from datetime import date
from decimal import Decimal

from pydantic import Field

from wealthtrack.domain.enums import AssetType, RiskLevel
from wealthtrack.domain.models.base import DomainModel, Money


class AssetPerformance(DomainModel):
    asset_id: str
    name: str
    asset_type: AssetType = Field(alias="type")
    value: Money
    return_amount: Money = Field(alias="return")  # After-tax
    return_percent: float


class PerformanceAnalytics(DomainModel):
    total_return: Money
    total_return_percent: float
    annualized_return: float
    sharpe_ratio: float
    max_drawdown: float  # Positive percent
    win_rate: float  # Fraction in [0, 1]
    best_asset: AssetPerformance | None = None
    worst_asset: AssetPerformance | None = None
    start_value: Money = Decimal(0)
    end_value: Money = Decimal(0)
    period_days: int = 0


class AssetTypeAllocation(DomainModel):
    asset_type: AssetType = Field(alias="type")
    value: Money
    percentage: float
    count: int
    average_return: float = 0.0


class CurrencyAllocation(DomainModel):
    currency: str
    value: Money
    percentage: float
    count: int


class RiskLevelAllocation(DomainModel):
    risk_level: RiskLevel
    value: Money
    percentage: float
    count: int


class AllocationAnalytics(DomainModel):
    by_asset_type: list[AssetTypeAllocation] = []
    by_currency: list[CurrencyAllocation] = []
    by_risk_level: list[RiskLevelAllocation] = []
    diversification_score: float = 0.0


class DailyReturn(DomainModel):
    day: date = Field(alias="date")
    value: Money
    return_amount: Money = Field(alias="return")
    return_percent: float


class MonthlyReturn(DomainModel):
    month: str  # "YYYY-MM"
    value: Money
    return_amount: Money = Field(alias="return")
    return_percent: float


class YearlyReturn(DomainModel):
    year: int
    value: Money
    return_amount: Money = Field(alias="return")
    return_percent: float


class TrendAnalytics(DomainModel):
    daily_returns: list[DailyReturn] = []
    monthly_returns: list[MonthlyReturn] = []
    yearly_returns: list[YearlyReturn] = []
    volatility: float = 0.0
    beta: float = 0.0


class RiskMetrics(DomainModel):
    portfolio_risk: float
    value_at_risk: float
    conditional_value_at_risk: float
    concentration_risk: float


class PortfolioAnalytics(DomainModel):
    performance: PerformanceAnalytics
    allocation: AllocationAnalytics
    trends: TrendAnalytics
    risk_metrics: RiskMetrics

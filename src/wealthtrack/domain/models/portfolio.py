"""Domain types for portfolio positions and valuation history."""

from datetime import datetime
from decimal import Decimal

from wealthtrack.domain.enums import AssetType, RiskLevel, default_risk_level
from wealthtrack.domain.models.base import DomainModel, Money
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings


class Holding(DomainModel):
    """Current position snapshot, already converted to the reporting currency."""

    asset_id: str
    name: str = ""
    asset_type: AssetType
    currency: str = "USD"
    risk_level: RiskLevel | None = None  # None = class default
    value: Money
    cost_basis: Money = Decimal(0)
    acquired_at: datetime | None = None

    @property
    def effective_risk_level(self) -> RiskLevel:
        return self.risk_level or default_risk_level(self.asset_type)


class ValuationPoint(DomainModel):
    """One historical sample of total portfolio value."""

    timestamp: datetime
    total_value: Money


class PortfolioSnapshot(DomainModel):
    """Everything the analytics pipeline reads for one user, fetched in one go."""

    holdings: tuple[Holding, ...] = ()
    valuation_history: tuple[ValuationPoint, ...] = ()
    profit_events: tuple[ProfitEvent, ...] = ()
    tax_settings: TaxSettings | None = None

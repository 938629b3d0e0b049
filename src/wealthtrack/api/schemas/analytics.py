"""Pydantic request models for analytics endpoints.

Responses are the domain PortfolioAnalytics record itself.
"""

from wealthtrack.api.schemas.base import CamelModel
from wealthtrack.domain.models.portfolio import Holding, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings


class AnalyticsComputeRequest(CamelModel):
    holdings: list[Holding] = []
    valuation_history: list[ValuationPoint] = []
    profit_events: list[ProfitEvent] = []
    tax_settings: TaxSettings | None = None
    benchmark_series: list[float] | None = None  # Benchmark daily return percents

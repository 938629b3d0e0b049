"""Analytics API: performance, allocation, trend and risk in one bundle."""

from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from wealthtrack.analytics.builder import compute_portfolio_analytics
from wealthtrack.analytics.service import AnalyticsService
from wealthtrack.api.deps import get_db, resolve_user
from wealthtrack.api.schemas.analytics import AnalyticsComputeRequest
from wealthtrack.config import settings
from wealthtrack.db.models.user import User
from wealthtrack.domain.models.analytics import PortfolioAnalytics

router = APIRouter(prefix="/api/analytics", tags=["analytics"])

DbDep = Annotated[AsyncSession, Depends(get_db)]


@router.get("", response_model=PortfolioAnalytics)
async def get_portfolio_analytics(
    db: DbDep,
    user: User = Depends(resolve_user),
    benchmark: Optional[list[float]] = Query(None, description="Benchmark daily return percents, oldest first"),
) -> PortfolioAnalytics:
    """Analytics over the user's stored holdings, valuation history and profit events."""
    return await AnalyticsService(db).compute(user, benchmark_series=benchmark)


@router.post("/compute", response_model=PortfolioAnalytics)
async def compute_analytics(body: AnalyticsComputeRequest) -> PortfolioAnalytics:
    """Analytics over an inline snapshot; nothing is read or stored."""
    return compute_portfolio_analytics(
        body.holdings,
        body.valuation_history,
        body.profit_events,
        body.tax_settings,
        body.benchmark_series,
        **settings.analytics_constants,
    )

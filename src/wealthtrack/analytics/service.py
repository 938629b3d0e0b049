"""AnalyticsService loads a user's snapshot and runs the analytics pipeline."""

import logging
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from wealthtrack.analytics.builder import compute_from_snapshot
from wealthtrack.config import settings
from wealthtrack.db.models.user import User
from wealthtrack.db.repos.portfolio_repo import PortfolioRepo
from wealthtrack.domain.models.analytics import PortfolioAnalytics

logger = logging.getLogger(__name__)


class AnalyticsService:
    """Fetch (I/O) first, then compute in-process on the immutable snapshot."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def compute(
        self,
        user: User,
        benchmark_series: Sequence[float] | None = None,
    ) -> PortfolioAnalytics:
        snapshot = await PortfolioRepo(self._session).load_snapshot(user)
        analytics = compute_from_snapshot(snapshot, benchmark_series, **settings.analytics_constants)
        logger.info(
            "Computed analytics for user %s: %d holdings, %d valuation points, %d profit events",
            user.id, len(snapshot.holdings), len(snapshot.valuation_history), len(snapshot.profit_events),
        )
        return analytics

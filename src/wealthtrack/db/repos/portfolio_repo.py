import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional, Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from wealthtrack.analytics.trend import to_utc
from wealthtrack.db.models.portfolio import HoldingRecord, ProfitEventRecord, ValuationPointRecord
from wealthtrack.db.models.user import User
from wealthtrack.db.repos.user_repo import tax_settings_of
from wealthtrack.domain.models.portfolio import Holding, PortfolioSnapshot, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent


def _amount(v: Optional[Decimal]) -> Decimal:
    return v if v is not None else Decimal(0)


def _naive_utc(ts: Optional[datetime]) -> Optional[datetime]:
    """Columns are timezone-naive and hold UTC."""
    return to_utc(ts).replace(tzinfo=None) if ts is not None else None


class PortfolioRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def replace_holdings(self, user_id: uuid.UUID, holdings: Sequence[Holding]) -> int:
        """Swap the user's whole position set for a freshly priced one."""
        await self._session.execute(delete(HoldingRecord).where(HoldingRecord.user_id == user_id))
        for h in holdings:
            self._session.add(HoldingRecord(
                user_id=user_id,
                asset_id=h.asset_id,
                name=h.name,
                asset_type=h.asset_type.value,
                currency=h.currency,
                risk_level=h.risk_level.value if h.risk_level else None,
                value=h.value,
                cost_basis=h.cost_basis,
                acquired_at=_naive_utc(h.acquired_at),
            ))
        await self._session.flush()
        return len(holdings)

    async def append_valuations(self, user_id: uuid.UUID, points: Sequence[ValuationPoint]) -> int:
        for p in points:
            self._session.add(ValuationPointRecord(
                user_id=user_id,
                timestamp=_naive_utc(p.timestamp),
                total_value=p.total_value,
            ))
        await self._session.flush()
        return len(points)

    async def add_profit_events(self, user_id: uuid.UUID, events: Sequence[ProfitEvent]) -> int:
        for e in events:
            self._session.add(ProfitEventRecord(
                user_id=user_id,
                asset_id=e.asset_id,
                asset_type=e.asset_type,
                profit_type=e.profit_type,
                gross_profit=e.gross_profit,
            ))
        await self._session.flush()
        return len(events)

    async def load_snapshot(self, user: User) -> PortfolioSnapshot:
        """Read everything the analytics pipeline needs for one user."""
        holdings = await self._session.execute(
            select(HoldingRecord).where(HoldingRecord.user_id == user.id).order_by(HoldingRecord.asset_id)
        )
        points = await self._session.execute(
            select(ValuationPointRecord)
            .where(ValuationPointRecord.user_id == user.id)
            .order_by(ValuationPointRecord.timestamp.asc())
        )
        events = await self._session.execute(
            select(ProfitEventRecord)
            .where(ProfitEventRecord.user_id == user.id)
            .order_by(ProfitEventRecord.created_at.asc())
        )

        return PortfolioSnapshot(
            holdings=tuple(
                Holding(
                    asset_id=h.asset_id,
                    name=h.name,
                    asset_type=h.asset_type,
                    currency=h.currency,
                    risk_level=h.risk_level,
                    value=_amount(h.value),
                    cost_basis=_amount(h.cost_basis),
                    acquired_at=h.acquired_at,
                )
                for h in holdings.scalars().all()
            ),
            valuation_history=tuple(
                ValuationPoint(timestamp=p.timestamp, total_value=_amount(p.total_value))
                for p in points.scalars().all()
            ),
            profit_events=tuple(
                ProfitEvent(
                    asset_id=e.asset_id,
                    asset_type=e.asset_type,
                    profit_type=e.profit_type,
                    gross_profit=_amount(e.gross_profit),
                )
                for e in events.scalars().all()
            ),
            tax_settings=tax_settings_of(user),
        )

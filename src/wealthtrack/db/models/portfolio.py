"""Portfolio persistence: holdings, valuation history and profit events."""

import uuid
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from wealthtrack.db.session import Base, TimestampMixin, UUIDPrimaryKey


class HoldingRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Current position; the whole set is replaced on each repricing."""

    __tablename__ = "holdings"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    asset_id: Mapped[str] = mapped_column(String(100))
    name: Mapped[str] = mapped_column(String(255), default="")
    asset_type: Mapped[str] = mapped_column(String(30))
    currency: Mapped[str] = mapped_column(String(10), default="USD")
    risk_level: Mapped[Optional[str]] = mapped_column(String(10), default=None)
    value: Mapped[Decimal] = mapped_column(Numeric(20, 4))
    cost_basis: Mapped[Decimal] = mapped_column(Numeric(20, 4), default=Decimal(0))
    acquired_at: Mapped[Optional[datetime]] = mapped_column(default=None)


class ValuationPointRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Append-only sample of total portfolio value."""

    __tablename__ = "valuation_points"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    timestamp: Mapped[datetime] = mapped_column(index=True)
    total_value: Mapped[Decimal] = mapped_column(Numeric(20, 4))


class ProfitEventRecord(UUIDPrimaryKey, TimestampMixin, Base):
    """Recorded taxable event (gain, dividend, interest, rental income)."""

    __tablename__ = "profit_events"

    user_id: Mapped[uuid.UUID] = mapped_column(ForeignKey("users.id"), index=True)
    asset_id: Mapped[Optional[str]] = mapped_column(String(100), default=None)
    asset_type: Mapped[str] = mapped_column(String(30))
    profit_type: Mapped[str] = mapped_column(String(30))
    gross_profit: Mapped[Decimal] = mapped_column(Numeric(20, 4))

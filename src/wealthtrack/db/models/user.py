from typing import Optional

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from wealthtrack.db.session import Base, TimestampMixin, UUIDPrimaryKey


class User(UUIDPrimaryKey, TimestampMixin, Base):
    """An application user; owns holdings, valuation history and tax settings."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True)
    name: Mapped[str] = mapped_column(String(255))
    # language, currency, theme, timezone, date_format, number_format
    preferences: Mapped[dict] = mapped_column(JSON, default=dict)
    # Serialized TaxSettings; None = no tax configured
    tax_settings: Mapped[Optional[dict]] = mapped_column(JSON, default=None)
    is_active: Mapped[bool] = mapped_column(default=True)

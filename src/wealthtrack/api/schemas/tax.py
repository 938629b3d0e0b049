"""Pydantic schemas for tax API."""

from decimal import Decimal

from wealthtrack.api.schemas.base import CamelModel
from wealthtrack.domain.models.tax import TaxSettings


class TaxEvaluateRequest(CamelModel):
    asset_type: str  # Unknown classes are allowed and carry no tax
    profit_type: str
    gross_profit: Decimal
    tax_settings: TaxSettings | None = None  # None = no tax configured

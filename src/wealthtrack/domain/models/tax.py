"""Domain types for tax settings and tax evaluation."""

from typing import Annotated

from pydantic import Field

from wealthtrack.domain.models.base import DomainModel, Money

# Percentage 0-100; None means "not configured" and is treated as 0
Rate = Annotated[Money, Field(ge=0, le=100)]


class StockTaxSettings(DomainModel):
    capital_gains_tax: Rate | None = None
    dividend_tax: Rate | None = None


class DepositTaxSettings(DomainModel):
    interest_tax: Rate | None = None


class PreciousMetalTaxSettings(DomainModel):
    capital_gains_tax: Rate | None = None


class RecurringIncomeTaxSettings(DomainModel):
    income_tax: Rate | None = None


class CryptoTaxSettings(DomainModel):
    capital_gains_tax: Rate | None = None


class RealEstateTaxSettings(DomainModel):
    capital_gains_tax: Rate | None = None
    rental_income_tax: Rate | None = None


class BondsTaxSettings(DomainModel):
    capital_gains_tax: Rate | None = None
    interest_tax: Rate | None = None


class CashTaxSettings(DomainModel):
    interest_tax: Rate | None = None


class TaxSettings(DomainModel):
    """A user's jurisdiction-specific flat tax rates, one section per asset class."""

    stock: StockTaxSettings | None = None
    deposit: DepositTaxSettings | None = None
    precious_metal: PreciousMetalTaxSettings | None = None
    recurring_income: RecurringIncomeTaxSettings | None = None
    crypto: CryptoTaxSettings | None = None
    real_estate: RealEstateTaxSettings | None = None
    bonds: BondsTaxSettings | None = None
    cash: CashTaxSettings | None = None


class ProfitEvent(DomainModel):
    """One taxable event: a realized gain, a dividend, accrued interest or rental income.

    asset_type and profit_type stay plain strings so unrecognized classes
    reach the evaluator and resolve to a zero rate.
    """

    asset_id: str | None = None  # Links the event to a Holding
    asset_type: str
    profit_type: str
    gross_profit: Money


class TaxResult(DomainModel):
    gross_profit: Money
    tax_amount: Money
    net_profit: Money
    tax_rate: Money  # Percent

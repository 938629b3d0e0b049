"""After-tax profit for a single taxable event. Pure functions, no I/O.

Amounts are Decimal so that tax_amount + net_profit == gross_profit holds
exactly. Losses pass through untaxed (no refund modelling) and a missing
TaxSettings record means no tax at all. Amounts are never rounded here;
two-decimal formatting belongs to the presentation layer.
"""

from decimal import Decimal

from wealthtrack.analytics.tax_rules import resolve_rate
from wealthtrack.domain.enums import AssetType, ProfitType
from wealthtrack.domain.models.base import as_decimal
from wealthtrack.domain.models.tax import ProfitEvent, TaxResult, TaxSettings

Amount = Decimal | float | int


def evaluate_tax(
    asset_type: str,
    profit_type: str,
    gross_profit: Amount,
    tax_settings: TaxSettings | None = None,
) -> TaxResult:
    """Apply the configured flat rate for (asset_type, profit_type) to gross_profit."""
    gross = as_decimal(gross_profit)
    if tax_settings is None or gross <= 0:
        return TaxResult(
            gross_profit=gross,
            tax_amount=Decimal(0),
            net_profit=gross,
            tax_rate=Decimal(0),
        )

    tax_rate = resolve_rate(asset_type, profit_type, tax_settings)
    tax_amount = gross * tax_rate / 100
    return TaxResult(
        gross_profit=gross,
        tax_amount=tax_amount,
        net_profit=gross - tax_amount,
        tax_rate=tax_rate,
    )


def evaluate_event(event: ProfitEvent, tax_settings: TaxSettings | None = None) -> TaxResult:
    return evaluate_tax(event.asset_type, event.profit_type, event.gross_profit, tax_settings)


# ── Shortcuts for single-transaction previews ────────────────────────────────


def evaluate_deposit_interest(accrued_interest: Amount, tax_settings: TaxSettings | None = None) -> TaxResult:
    return evaluate_tax(AssetType.DEPOSIT.value, ProfitType.INTEREST.value, accrued_interest, tax_settings)


def evaluate_stock_capital_gains(capital_gains: Amount, tax_settings: TaxSettings | None = None) -> TaxResult:
    return evaluate_tax(AssetType.STOCK.value, ProfitType.CAPITAL_GAINS.value, capital_gains, tax_settings)


def evaluate_dividend(dividend_amount: Amount, tax_settings: TaxSettings | None = None) -> TaxResult:
    return evaluate_tax(AssetType.STOCK.value, ProfitType.DIVIDEND.value, dividend_amount, tax_settings)


def evaluate_precious_metal_gains(capital_gains: Amount, tax_settings: TaxSettings | None = None) -> TaxResult:
    return evaluate_tax(AssetType.PRECIOUS_METAL.value, ProfitType.CAPITAL_GAINS.value, capital_gains, tax_settings)


def evaluate_recurring_income(income_amount: Amount, tax_settings: TaxSettings | None = None) -> TaxResult:
    """Recurring income uses incomeTax regardless of profit type."""
    return evaluate_tax(
        AssetType.RECURRING_INCOME.value, ProfitType.CAPITAL_GAINS.value, income_amount, tax_settings,
    )

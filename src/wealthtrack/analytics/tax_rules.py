"""Which configured tax rate applies to an (asset class, profit type) pair.

Combinations missing from TAX_RULES carry no tax.
"""

from decimal import Decimal

from wealthtrack.domain.enums import AssetType, ProfitType
from wealthtrack.domain.models.tax import TaxSettings

# (asset type, profit type) -> (TaxSettings section, rate field)
TAX_RULES: dict[tuple[AssetType, ProfitType], tuple[str, str]] = {
    (AssetType.STOCK, ProfitType.CAPITAL_GAINS): ("stock", "capital_gains_tax"),
    (AssetType.STOCK, ProfitType.DIVIDEND): ("stock", "dividend_tax"),
    (AssetType.DEPOSIT, ProfitType.INTEREST): ("deposit", "interest_tax"),
    (AssetType.PRECIOUS_METAL, ProfitType.CAPITAL_GAINS): ("precious_metal", "capital_gains_tax"),
    (AssetType.CRYPTO, ProfitType.CAPITAL_GAINS): ("crypto", "capital_gains_tax"),
    (AssetType.REAL_ESTATE, ProfitType.CAPITAL_GAINS): ("real_estate", "capital_gains_tax"),
    (AssetType.REAL_ESTATE, ProfitType.RENTAL_INCOME): ("real_estate", "rental_income_tax"),
    (AssetType.BONDS, ProfitType.CAPITAL_GAINS): ("bonds", "capital_gains_tax"),
    (AssetType.BONDS, ProfitType.INTEREST): ("bonds", "interest_tax"),
    (AssetType.CASH, ProfitType.INTEREST): ("cash", "interest_tax"),
    # Recurring income is taxed the same whatever the profit type
    **{
        (AssetType.RECURRING_INCOME, profit_type): ("recurring_income", "income_tax")
        for profit_type in ProfitType
    },
}


def rate_field(asset_type: str, profit_type: str) -> tuple[str, str] | None:
    """Return the (section, field) holding the rate, or None if untaxed.

    Recurring income also matches profit types outside ProfitType.
    """
    if asset_type == AssetType.RECURRING_INCOME.value:
        return ("recurring_income", "income_tax")
    try:
        key = (AssetType(asset_type), ProfitType(profit_type))
    except ValueError:
        return None
    return TAX_RULES.get(key)


def resolve_rate(asset_type: str, profit_type: str, tax_settings: TaxSettings) -> Decimal:
    """Configured rate in percent; unset sections/fields and unknown pairs give 0."""
    field = rate_field(asset_type, profit_type)
    if field is None:
        return Decimal(0)
    section_name, rate_name = field
    section = getattr(tax_settings, section_name)
    if section is None:
        return Decimal(0)
    return getattr(section, rate_name) or Decimal(0)

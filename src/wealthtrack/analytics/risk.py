"""Parametric risk metrics.

VaR uses the normal approximation at 95% confidence over one period, and
CVaR is a fixed multiple of VaR approximating the expected shortfall of a
normal tail. Both constants are overridable through configuration.
"""

from decimal import Decimal
from typing import Sequence

from wealthtrack.analytics.allocation import diversification_score
from wealthtrack.analytics.trend import ordered_history, volatility
from wealthtrack.domain.models.analytics import RiskMetrics
from wealthtrack.domain.models.portfolio import Holding, ValuationPoint

VAR_Z_SCORE = 1.645
CVAR_MULTIPLIER = 1.25


def portfolio_value(holdings: Sequence[Holding], valuation_history: Sequence[ValuationPoint]) -> Decimal:
    """Current value from holdings, or the latest valuation when no holdings are given."""
    if holdings:
        return sum((h.value for h in holdings), Decimal(0))
    history = ordered_history(valuation_history)
    return history[-1].total_value if history else Decimal(0)


def value_at_risk(total_value: Decimal | float, portfolio_risk: float, z_score: float = VAR_Z_SCORE) -> float:
    return float(total_value) * z_score * portfolio_risk / 100


def aggregate_risk(
    valuation_history: Sequence[ValuationPoint],
    holdings: Sequence[Holding],
    *,
    z_score: float = VAR_Z_SCORE,
    cvar_multiplier: float = CVAR_MULTIPLIER,
) -> RiskMetrics:
    portfolio_risk = volatility(valuation_history) if len(valuation_history) >= 2 else 0.0
    var = value_at_risk(portfolio_value(holdings, valuation_history), portfolio_risk, z_score)
    return RiskMetrics(
        portfolio_risk=portfolio_risk,
        value_at_risk=var,
        conditional_value_at_risk=var * cvar_multiplier,
        concentration_risk=100 - diversification_score(holdings),
    )

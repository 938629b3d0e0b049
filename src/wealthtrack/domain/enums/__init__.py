from wealthtrack.domain.enums.asset import AssetType, RiskLevel, default_risk_level
from wealthtrack.domain.enums.tax import ProfitType
from wealthtrack.domain.enums.trend import Granularity

__all__ = [
    "AssetType",
    "Granularity",
    "ProfitType",
    "RiskLevel",
    "default_risk_level",
]

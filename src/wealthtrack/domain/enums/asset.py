from enum import Enum


class AssetType(str, Enum):
    """Asset classes a holding can belong to."""

    STOCK = "stock"
    DEPOSIT = "deposit"
    PRECIOUS_METAL = "preciousMetal"
    RECURRING_INCOME = "recurringIncome"
    CRYPTO = "crypto"
    REAL_ESTATE = "realEstate"
    BONDS = "bonds"
    CASH = "cash"
    OTHER = "other"  # No tax rules apply


class RiskLevel(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_DEFAULT_RISK_LEVELS: dict[AssetType, RiskLevel] = {
    AssetType.CASH: RiskLevel.LOW,
    AssetType.DEPOSIT: RiskLevel.LOW,
    AssetType.BONDS: RiskLevel.MEDIUM,
    AssetType.PRECIOUS_METAL: RiskLevel.MEDIUM,
    AssetType.RECURRING_INCOME: RiskLevel.MEDIUM,
    AssetType.STOCK: RiskLevel.HIGH,
    AssetType.CRYPTO: RiskLevel.HIGH,
    AssetType.REAL_ESTATE: RiskLevel.HIGH,
}


def default_risk_level(asset_type: AssetType) -> RiskLevel:
    """Risk level assumed for a holding that does not declare one."""
    return _DEFAULT_RISK_LEVELS.get(asset_type, RiskLevel.MEDIUM)

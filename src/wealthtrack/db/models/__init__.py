from wealthtrack.db.models.portfolio import HoldingRecord, ProfitEventRecord, ValuationPointRecord
from wealthtrack.db.models.user import User

__all__ = [
    "HoldingRecord",
    "ProfitEventRecord",
    "User",
    "ValuationPointRecord",
]

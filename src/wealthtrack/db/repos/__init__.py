from wealthtrack.db.repos.portfolio_repo import PortfolioRepo
from wealthtrack.db.repos.user_repo import UserRepo

__all__ = [
    "PortfolioRepo",
    "UserRepo",
]

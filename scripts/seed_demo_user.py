"""Seed a demo user with tax settings, holdings, valuation history and profit events.

Usage:
    PYTHONPATH=src python scripts/seed_demo_user.py

Idempotent: an existing demo user keeps its history; holdings are replaced.
Then open the dashboard or call: GET /api/analytics?user_id=<printed id>
"""

import asyncio
import logging
import sys
from datetime import datetime, timedelta, timezone

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("seed_demo_user")
logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

DEMO_EMAIL = "demo@wealthtrack.local"

TAX_SETTINGS = {
    "stock": {"capitalGainsTax": 19, "dividendTax": 19},
    "deposit": {"interestTax": 19},
    "crypto": {"capitalGainsTax": 19},
    "bonds": {"interestTax": 19, "capitalGainsTax": 19},
    "realEstate": {"rentalIncomeTax": 8.5},
}

HOLDINGS = [
    {"assetId": "aapl", "name": "Apple", "assetType": "stock", "currency": "USD", "value": 6000, "costBasis": 4500},
    {"assetId": "btc", "name": "Bitcoin", "assetType": "crypto", "currency": "USD", "value": 4000, "costBasis": 5000},
    {"assetId": "td-1", "name": "Term deposit", "assetType": "deposit", "currency": "EUR", "value": 10000, "costBasis": 9600},
    {"assetId": "flat", "name": "Rental flat", "assetType": "realEstate", "currency": "EUR", "value": 90000, "costBasis": 80000},
]

PROFIT_EVENTS = [
    {"assetId": "aapl", "assetType": "stock", "profitType": "capital_gains", "grossProfit": 1500},
    {"assetId": "aapl", "assetType": "stock", "profitType": "dividend", "grossProfit": 120},
    {"assetId": "btc", "assetType": "crypto", "profitType": "capital_gains", "grossProfit": -1000},
    {"assetId": "td-1", "assetType": "deposit", "profitType": "interest", "grossProfit": 400},
    {"assetId": "flat", "assetType": "realEstate", "profitType": "rental_income", "grossProfit": 6000},
]


def separator(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


def valuation_history(days: int = 120) -> list[dict]:
    """A gently rising series with a dip in the middle."""
    start = datetime.now(timezone.utc) - timedelta(days=days)
    points = []
    for i in range(days + 1):
        drift = 100000 + i * 80
        dip = -4000 if days // 3 <= i <= days // 2 else 0
        points.append({"timestamp": start + timedelta(days=i), "totalValue": drift + dip})
    return points


async def main() -> None:
    from wealthtrack.config import settings
    from wealthtrack.db.session import build_engine, build_session_factory

    separator("Seed: Demo User")
    print(f"Database: {settings.db_host}:{settings.db_port}/{settings.db_name}\n")

    engine = build_engine(settings.database_url, echo=False)
    session_factory = build_session_factory(engine)

    async with session_factory() as session:
        try:
            await seed(session)
            await session.commit()
        except Exception:
            await session.rollback()
            logger.exception("Seeding failed")
            sys.exit(1)

    await engine.dispose()
    separator("Seeding Complete")


async def seed(session) -> None:
    from wealthtrack.db.repos.portfolio_repo import PortfolioRepo
    from wealthtrack.db.repos.user_repo import UserRepo
    from wealthtrack.domain.models.portfolio import Holding, ValuationPoint
    from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings

    user_repo = UserRepo(session)
    portfolio_repo = PortfolioRepo(session)

    user = await user_repo.get_by_email(DEMO_EMAIL)
    if user is None:
        user = await user_repo.create(
            email=DEMO_EMAIL,
            name="Demo User",
            preferences={"currency": "USD", "language": "en"},
            tax_settings=TaxSettings.model_validate(TAX_SETTINGS),
        )
        await portfolio_repo.append_valuations(
            user.id, [ValuationPoint.model_validate(p) for p in valuation_history()],
        )
        await portfolio_repo.add_profit_events(
            user.id, [ProfitEvent.model_validate(e) for e in PROFIT_EVENTS],
        )
        status = "created"
    else:
        status = "existing"

    count = await portfolio_repo.replace_holdings(user.id, [Holding.model_validate(h) for h in HOLDINGS])
    print(f"User: {user.email}  [{status}]  id={user.id}")
    print(f"Holdings replaced: {count}")


if __name__ == "__main__":
    asyncio.run(main())

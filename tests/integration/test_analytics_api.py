import sys
import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from wealthtrack.api.deps import get_db
from wealthtrack.api.main import app
from wealthtrack.db.session import Base
import wealthtrack.db.models  # noqa: F401

HOLDINGS = [
    {"assetId": "aapl", "name": "Apple", "assetType": "stock", "value": 6000, "costBasis": 5000},
    {"assetId": "btc", "name": "Bitcoin", "assetType": "crypto", "value": 4000, "costBasis": 5000},
]

POINTS = [
    {"timestamp": "2025-01-01T00:00:00Z", "totalValue": 10000},
    {"timestamp": "2025-01-02T00:00:00Z", "totalValue": 9000},
    {"timestamp": "2025-01-11T00:00:00Z", "totalValue": 10500},
]

EVENTS = [
    {"assetId": "aapl", "assetType": "stock", "profitType": "capital_gains", "grossProfit": 1000},
    {"assetId": "btc", "assetType": "crypto", "profitType": "capital_gains", "grossProfit": 500},
]

TAX_SETTINGS = {"stock": {"capitalGainsTax": 20}}


@pytest.fixture()
async def client():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


async def _seed_user(client) -> str:
    res = await client.post("/api/users", json={
        "email": "ana@example.com", "name": "Ana", "taxSettings": TAX_SETTINGS,
    })
    user_id = res.json()["id"]
    await client.put(f"/api/users/{user_id}/holdings", json={"holdings": HOLDINGS})
    await client.post(f"/api/users/{user_id}/valuations", json={"points": POINTS})
    await client.post(f"/api/users/{user_id}/profit-events", json={"events": EVENTS})
    return user_id


def _check_expected(data: dict) -> None:
    perf = data["performance"]
    assert perf["totalReturn"] == pytest.approx(1300)
    assert perf["totalReturnPercent"] == pytest.approx(13)
    assert perf["winRate"] == 1
    assert perf["maxDrawdown"] == pytest.approx(10)
    assert perf["periodDays"] == 10
    assert perf["bestAsset"]["assetId"] == "aapl"
    assert perf["bestAsset"]["return"] == pytest.approx(800)
    assert perf["worstAsset"]["assetId"] == "btc"

    by_type = data["allocation"]["byAssetType"]
    assert [(a["type"], a["percentage"]) for a in by_type] == [
        ("stock", pytest.approx(60)),
        ("crypto", pytest.approx(40)),
    ]
    assert [d["date"] for d in data["trends"]["dailyReturns"]] == ["2025-01-01", "2025-01-02", "2025-01-11"]
    assert data["riskMetrics"]["concentrationRisk"] == pytest.approx(100 - data["allocation"]["diversificationScore"])


class TestStoredAnalytics:
    async def test_analytics_for_user(self, client):
        user_id = await _seed_user(client)
        res = await client.get("/api/analytics", params={"user_id": user_id})
        assert res.status_code == 200
        _check_expected(res.json())

    async def test_benchmark_beta(self, client):
        user_id = await _seed_user(client)
        res = await client.get("/api/analytics", params=[
            ("user_id", user_id), ("benchmark", "-10"), ("benchmark", "16.666666666666668"),
        ])
        assert res.status_code == 200
        assert res.json()["trends"]["beta"] == pytest.approx(1)

    async def test_empty_portfolio(self, client):
        res = await client.post("/api/users", json={"email": "new@example.com", "name": "New"})
        res = await client.get("/api/analytics", params={"user_id": res.json()["id"]})
        assert res.status_code == 200
        data = res.json()
        assert data["performance"]["totalReturn"] == 0
        assert data["performance"]["bestAsset"] is None
        assert data["allocation"]["byAssetType"] == []
        assert data["riskMetrics"]["valueAtRisk"] == 0

    async def test_unknown_user(self, client):
        res = await client.get("/api/analytics", params={"user_id": str(uuid.uuid4())})
        assert res.status_code == 404

    async def test_missing_user_id(self, client):
        res = await client.get("/api/analytics")
        assert res.status_code == 422


class TestInlineAnalytics:
    async def test_compute(self, client):
        res = await client.post("/api/analytics/compute", json={
            "holdings": HOLDINGS,
            "valuationHistory": POINTS,
            "profitEvents": EVENTS,
            "taxSettings": TAX_SETTINGS,
        })
        assert res.status_code == 200
        _check_expected(res.json())

    async def test_compute_empty(self, client):
        res = await client.post("/api/analytics/compute", json={})
        assert res.status_code == 200
        assert res.json()["trends"]["volatility"] == 0

    async def test_huge_short_term_gain_keeps_numeric_annualized_return(self, client):
        res = await client.post("/api/analytics/compute", json={
            "holdings": [{"assetId": "aapl", "assetType": "stock", "value": 20000, "costBasis": 100}],
            "valuationHistory": [
                {"timestamp": "2025-01-01T00:00:00Z", "totalValue": 100},
                {"timestamp": "2025-01-02T00:00:00Z", "totalValue": 20000},
            ],
            "profitEvents": [
                {"assetId": "aapl", "assetType": "stock", "profitType": "capital_gains", "grossProfit": 19900},
            ],
        })
        assert res.status_code == 200
        annualized = res.json()["performance"]["annualizedReturn"]
        assert annualized == sys.float_info.max

    async def test_invalid_holding(self, client):
        res = await client.post("/api/analytics/compute", json={"holdings": [{"assetId": "x"}]})
        assert res.status_code == 422

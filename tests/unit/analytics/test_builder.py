"""End-to-end tests for compute_portfolio_analytics."""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

import pytest

from wealthtrack.analytics.builder import compute_from_snapshot, compute_portfolio_analytics, performance_window
from wealthtrack.domain.enums import AssetType
from wealthtrack.domain.models.portfolio import Holding, PortfolioSnapshot, ValuationPoint
from wealthtrack.domain.models.tax import ProfitEvent, TaxSettings

SETTINGS = TaxSettings.model_validate({"stock": {"capitalGainsTax": 20}, "deposit": {"interestTax": 19}})

HOLDINGS = (
    Holding(asset_id="aapl", name="Apple", asset_type=AssetType.STOCK, value=6000, cost_basis=5000),
    Holding(asset_id="dep", name="Term deposit", asset_type=AssetType.DEPOSIT, value=4000, cost_basis=4000),
)

HISTORY = (
    ValuationPoint(timestamp=datetime(2025, 1, 1, tzinfo=timezone.utc), total_value=9000),
    ValuationPoint(timestamp=datetime(2025, 1, 2, tzinfo=timezone.utc), total_value=9900),
    ValuationPoint(timestamp=datetime(2025, 1, 3, tzinfo=timezone.utc), total_value=9405),
    ValuationPoint(timestamp=datetime(2025, 1, 11, tzinfo=timezone.utc), total_value=10000),
)

EVENTS = (
    ProfitEvent(asset_id="aapl", asset_type="stock", profit_type="capital_gains", gross_profit=1000),
    ProfitEvent(asset_id="dep", asset_type="deposit", profit_type="interest", gross_profit=100),
)


class TestComputePortfolioAnalytics:
    def test_full_pipeline(self):
        result = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)

        perf = result.performance
        assert perf.total_return == 800 + 81
        assert perf.total_return_percent == pytest.approx(881 / 9000 * 100)
        assert perf.period_days == 10
        assert perf.win_rate == 1
        assert perf.best_asset.asset_id == "aapl"
        assert perf.worst_asset.asset_id == "dep"
        assert perf.max_drawdown == pytest.approx(5)

        assert [a.percentage for a in result.allocation.by_asset_type] == [pytest.approx(60), pytest.approx(40)]
        assert len(result.trends.daily_returns) == 4
        assert result.risk_metrics.portfolio_risk == pytest.approx(result.trends.volatility)

    def test_empty_inputs(self):
        result = compute_portfolio_analytics([], [], [])
        assert result.performance.total_return == 0
        assert result.performance.total_return_percent == 0
        assert result.performance.best_asset is None
        assert result.allocation.by_asset_type == []
        assert result.trends.volatility == 0
        assert result.risk_metrics.value_at_risk == 0

    def test_deterministic(self):
        first = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)
        second = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)
        assert first == second

    def test_concurrent_calls_share_nothing(self):
        expected = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(
                lambda _: compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS), range(16),
            ))
        assert all(r == expected for r in results)

    def test_constants_pass_through(self):
        default = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)
        doubled = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS, z_score=1.645 * 2)
        assert doubled.risk_metrics.value_at_risk == pytest.approx(default.risk_metrics.value_at_risk * 2)

    def test_from_snapshot(self):
        snapshot = PortfolioSnapshot(
            holdings=HOLDINGS, valuation_history=HISTORY, profit_events=EVENTS, tax_settings=SETTINGS,
        )
        assert compute_from_snapshot(snapshot) == compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS)

    def test_camel_case_payload(self):
        payload = compute_portfolio_analytics(HOLDINGS, HISTORY, EVENTS, SETTINGS).model_dump(
            mode="json", by_alias=True,
        )
        assert set(payload) == {"performance", "allocation", "trends", "riskMetrics"}
        assert {"totalReturn", "annualizedReturn", "sharpeRatio", "maxDrawdown", "winRate"} <= set(
            payload["performance"]
        )
        assert payload["performance"]["bestAsset"]["type"] == "stock"
        assert "return" in payload["performance"]["bestAsset"]
        assert payload["allocation"]["byAssetType"][0]["type"] == "stock"
        assert "conditionalValueAtRisk" in payload["riskMetrics"]


class TestPerformanceWindow:
    def test_from_history(self):
        assert performance_window(HOLDINGS, reversed(HISTORY)) == (9000, 10000, 10)

    def test_without_history(self):
        assert performance_window(HOLDINGS, []) == (9000, 10000, 0)

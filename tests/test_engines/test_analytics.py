"""Tests for holdings analytics."""

from esopplan.engines.analytics import summarize_holdings
from esopplan.models.holding import HoldingRecord


class TestSummarizeHoldings:
    def test_empty(self):
        summary = summarize_holdings([])
        assert summary.total_value == 0
        assert summary.holdings_count == 0
        assert summary.percent_of_portfolio is None
        assert summary.high_concentration is False

    def test_values_at_exercise_price(self, sample_holdings: list[HoldingRecord]):
        summary = summarize_holdings(sample_holdings)
        # 1000 * 10 + 200 * 25
        assert summary.total_value == 15000
        assert summary.total_vested_shares == 650
        assert summary.total_unvested_shares == 550
        assert summary.holdings_count == 2

    def test_market_price_overrides(self, sample_holdings: list[HoldingRecord]):
        summary = summarize_holdings(sample_holdings, market_prices={"acme": 40.0})
        assert summary.total_value == 48000

    def test_only_esop_is_fully_concentrated(self, sample_holdings: list[HoldingRecord]):
        summary = summarize_holdings(sample_holdings)
        assert summary.percent_of_portfolio == 100.0
        assert summary.high_concentration is True

    def test_concentration_threshold(self, sample_holdings: list[HoldingRecord]):
        diversified = summarize_holdings(sample_holdings, other_investments=135000)
        assert diversified.percent_of_portfolio == 10.0
        assert diversified.high_concentration is False

        at_threshold = summarize_holdings(sample_holdings, other_investments=60000)
        assert at_threshold.percent_of_portfolio == 20.0
        assert at_threshold.high_concentration is False

        strict = summarize_holdings(
            sample_holdings, other_investments=60000, concentration_threshold=15
        )
        assert strict.high_concentration is True

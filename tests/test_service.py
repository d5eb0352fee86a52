"""Tests for analytics response assembly and holdings payload shaping."""

import json
from datetime import date

import numpy as np

from esopplan.engines.montecarlo import MonteCarloProjector
from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import UserGoalProfile
from esopplan.service import (
    build_analytics_response,
    coerce_holding_numbers,
    transform_holdings_payload,
)


class TestBuildAnalyticsResponse:
    def test_payload_shape(
        self, sample_holdings: list[HoldingRecord], goal_profile: UserGoalProfile
    ):
        payload = build_analytics_response(
            "us",
            "medium",
            goal_profile,
            sample_holdings,
            projector=MonteCarloProjector(scenarios=20, rng=np.random.default_rng(1)),
            as_of=date(2025, 1, 1),
        )

        assert payload["status"] == "success"
        assert payload["summary"]["total_value"] == 15000
        assert payload["strategy"]["region"] == "us"
        assert payload["strategy"]["risk_tolerance"] == "medium"
        assert payload["strategy"]["benchmarks"]["last_updated"] == "2025-01-01"
        assert set(payload["success_probabilities"]) == {
            "low_risk",
            "medium_risk",
            "high_risk",
        }
        assert list(payload["success_probabilities"]["high_risk"]) == [
            "year5",
            "year10",
            "year15",
            "year20",
        ]

    def test_payload_is_json_serializable(self, goal_profile: UserGoalProfile):
        payload = build_analytics_response(
            "india",
            "bogus",
            goal_profile,
            [],
            projector=MonteCarloProjector(scenarios=5, rng=np.random.default_rng(0)),
        )
        text = json.dumps(payload)
        assert '"risk_tolerance": "medium"' in text
        funding = payload["strategy"]["esop_strategy"]["exercise_funding"]
        assert funding["tax_rate"] == 10


class TestCoerceHoldingNumbers:
    def test_string_fields_become_numbers(self):
        data = coerce_holding_numbers(
            {
                "total_grants": "1,000",
                "vested": "40",
                "unvested": None,
                "exercised": "0",
                "exercise_price": "$2.50",
                "quantity": "1000",
                "price": "2.5",
                "ticker": "ABC",
            }
        )
        assert data["total_grants"] == 1000
        assert data["vested"] == 40
        assert data["unvested"] == 0
        assert data["exercised"] == 0
        assert data["exercise_price"] == 2.5
        assert data["quantity"] == 1000
        assert data["price"] == 2.5
        assert data["ticker"] == "ABC"

    def test_record_is_dumped(self, sample_holding: HoldingRecord):
        data = coerce_holding_numbers(sample_holding)
        assert data["total_grants"] == 1000
        assert data["grant_date"] == "2021-03-15T00:00:00"
        assert data["status"] == "Not exercised"


class TestTransformHoldingsPayload:
    def test_success_payload(self):
        payload = {"status": "success", "data": [{"vested": "5", "price": "1.5"}]}
        result = transform_holdings_payload(payload)
        assert result["data"] == [{"vested": 5, "price": 1.5}]
        assert payload["data"][0]["vested"] == "5"

    def test_error_payload_untouched(self):
        payload = {"status": "error", "data": [{"vested": "5"}]}
        assert transform_holdings_payload(payload) is payload

    def test_non_list_data_untouched(self):
        payload = {"status": "success", "data": None}
        assert transform_holdings_payload(payload) is payload

"""Analytics request assembly and response shaping.

The presentation layer calls ``build_analytics_response`` with a region, a
risk tolerance, the user's goal profile and the owner's holdings, and gets
back a JSON-ready dict. Numeric holding fields are forced to real numbers
before anything leaves this module, whatever form they were stored in.
"""

import logging
from datetime import date
from typing import Any

from esopplan.engines.analytics import summarize_holdings
from esopplan.engines.montecarlo import MonteCarloProjector
from esopplan.engines.strategy import synthesize
from esopplan.models.enums import PlanningRegion, RiskTolerance
from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import AnalyticsSummary, UserGoalProfile
from esopplan.normalization.records import to_int, to_price

logger = logging.getLogger(__name__)

INTEGER_FIELDS = ("total_grants", "vested", "unvested", "exercised", "quantity")
DECIMAL_FIELDS = ("exercise_price", "price")


def build_analytics_response(
    region: str | PlanningRegion,
    risk_tolerance: str | RiskTolerance,
    goals: UserGoalProfile,
    holdings: list[HoldingRecord],
    summary: AnalyticsSummary | None = None,
    projector: MonteCarloProjector | None = None,
    as_of: date | None = None,
) -> dict[str, Any]:
    """Strategy bundle plus success probabilities as one payload."""
    if summary is None:
        summary = summarize_holdings(holdings)
    projector = projector or MonteCarloProjector()

    bundle = synthesize(region, risk_tolerance, goals, summary, as_of=as_of)
    probabilities = projector.project_all(holdings, goals)
    logger.info(
        "Built analytics for %d holdings (region=%s, risk=%s)",
        len(holdings),
        bundle.region.value,
        bundle.risk_tolerance.value,
    )
    return {
        "status": "success",
        "summary": summary.model_dump(mode="json"),
        "strategy": bundle.model_dump(mode="json"),
        "success_probabilities": probabilities.model_dump(mode="json"),
    }


def coerce_holding_numbers(record: HoldingRecord | dict[str, Any]) -> dict[str, Any]:
    """Return a holding as a dict whose quantity and price fields are numbers."""
    if isinstance(record, HoldingRecord):
        data = record.model_dump(mode="json")
    else:
        data = dict(record)
    for field in INTEGER_FIELDS:
        if field in data:
            data[field] = to_int(data[field])
    for field in DECIMAL_FIELDS:
        if field in data:
            data[field] = to_price(data[field])
    return data


def transform_holdings_payload(payload: dict[str, Any]) -> dict[str, Any]:
    """Coerce numeric fields of every record in a successful holdings payload.

    Payloads that are not ``{"status": "success", "data": [...]}`` pass
    through unchanged.
    """
    if payload.get("status") != "success" or not isinstance(payload.get("data"), list):
        return payload
    logger.debug("Transforming %d holding records", len(payload["data"]))
    return {**payload, "data": [coerce_holding_numbers(r) for r in payload["data"]]}

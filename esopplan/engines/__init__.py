"""Projection and recommendation engines."""

from esopplan.engines.analytics import summarize_holdings
from esopplan.engines.montecarlo import MonteCarloProjector
from esopplan.engines.strategy import (
    calculate_downside_metrics,
    generate_benchmarks,
    generate_esop_strategy,
    generate_strategies,
    get_risk_adjusted_allocation,
    synthesize,
)

__all__ = [
    "MonteCarloProjector",
    "calculate_downside_metrics",
    "generate_benchmarks",
    "generate_esop_strategy",
    "generate_strategies",
    "get_risk_adjusted_allocation",
    "summarize_holdings",
    "synthesize",
]

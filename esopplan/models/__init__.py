"""Data models for ESOP Planner."""

from esopplan.models.enums import (
    HoldingStatus,
    IngestionPhase,
    PlanningRegion,
    RiskTolerance,
    resolve_region,
    resolve_risk_tolerance,
)
from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import AnalyticsSummary, UserGoalProfile
from esopplan.models.strategy import (
    ActionStep,
    AllocationTargets,
    Benchmark,
    BenchmarkSet,
    BenchmarkSnapshot,
    DownsideMetrics,
    EsopStrategy,
    ExerciseFundingPlan,
    Strategy,
    StrategyBundle,
    StressTest,
    SuccessProbabilities,
    TrailingReturns,
)

__all__ = [
    "ActionStep",
    "AllocationTargets",
    "AnalyticsSummary",
    "Benchmark",
    "BenchmarkSet",
    "BenchmarkSnapshot",
    "DownsideMetrics",
    "EsopStrategy",
    "ExerciseFundingPlan",
    "HoldingRecord",
    "HoldingStatus",
    "IngestionPhase",
    "PlanningRegion",
    "RiskTolerance",
    "Strategy",
    "StrategyBundle",
    "StressTest",
    "SuccessProbabilities",
    "TrailingReturns",
    "UserGoalProfile",
    "resolve_region",
    "resolve_risk_tolerance",
]

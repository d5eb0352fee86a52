"""Strategy, benchmark and simulation output models."""

from datetime import date

from pydantic import BaseModel, Field

from esopplan.models.enums import PlanningRegion, RiskTolerance


class Strategy(BaseModel):
    """A single investment strategy recommendation."""

    title: str
    description: str
    examples: list[str]
    allocation: int = Field(ge=0, le=100)
    detailed_advice: str


class StressTest(BaseModel):
    recession: int
    market_crash: int
    inflation_spike: int


class DownsideMetrics(BaseModel):
    max_drawdown: float
    worst_year: float
    volatility: float
    stress_test: StressTest
    advisories: list[str]
    recovery_time: str


class TrailingReturns(BaseModel):
    one_year: float
    three_year: float
    five_year: float
    ten_year: float


class Benchmark(BaseModel):
    name: str
    cagr: float
    volatility: float
    sharpe: float
    returns: TrailingReturns
    description: str
    data_as_of: date


class BenchmarkSet(BaseModel):
    primary: Benchmark
    secondary: Benchmark
    alternative: Benchmark


class BenchmarkSnapshot(BaseModel):
    region: PlanningRegion
    benchmarks: BenchmarkSet
    risk_free_rate: float
    inflation_rate: float
    market_description: str
    last_updated: date
    data_sources: dict[str, list[str]]


class AllocationTargets(BaseModel):
    equity: int
    bonds: int
    alternatives: int


class ExerciseFundingPlan(BaseModel):
    estimated_cost: int
    monthly_savings_target: int
    annual_sell_percentage: int
    tax_rate: int
    funding_sources: list[str]


class ActionStep(BaseModel):
    step: str
    details: str
    timeline: str


class EsopStrategy(BaseModel):
    """Liquidation, tax and exercise-funding guidance for ESOP holdings."""

    overview: str
    risk_assessment: str
    liquidation_plan: str
    liquidation_percentage: int
    tax_planning: str
    future_vesting_strategy: str
    exercise_funding: ExerciseFundingPlan
    action_steps: list[ActionStep]
    additional_recommendations: list[str]


class StrategyBundle(BaseModel):
    """Everything the synthesizer produces for one request."""

    region: PlanningRegion
    risk_tolerance: RiskTolerance
    strategies: list[Strategy]
    downside: DownsideMetrics
    benchmarks: BenchmarkSnapshot
    allocation: AllocationTargets
    esop_strategy: EsopStrategy


class SuccessProbabilities(BaseModel):
    """Goal-achievement probability per risk profile, keyed ``year<N>``."""

    low_risk: dict[str, float] = {}
    medium_risk: dict[str, float] = {}
    high_risk: dict[str, float] = {}

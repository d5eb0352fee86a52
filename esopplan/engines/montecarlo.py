"""Monte Carlo goal-achievement projection.

A deliberately simple model: each year's return is an independent draw from
a normal distribution whose mean and standard deviation depend only on the
risk tolerance. Draws come from a Box-Muller transform of two uniform
arrays, so results vary run to run unless a seeded ``numpy.random.Generator``
(``np.random.default_rng(seed)``) is injected.
"""

import logging

import numpy as np

from esopplan.engines.benchmarks import RETURN_PROFILES
from esopplan.models.enums import RiskTolerance, resolve_risk_tolerance
from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import UserGoalProfile
from esopplan.models.strategy import SuccessProbabilities

logger = logging.getLogger(__name__)

DEFAULT_SCENARIOS = 1000
PROJECTION_HORIZONS = (5, 10, 15, 20)

# Illustrative goal: retirement age times a fixed amount per year.
# Not a financial formula.
GOAL_PER_RETIREMENT_YEAR = 50000


class MonteCarloProjector:
    """Estimates the probability of reaching a goal value."""

    def __init__(
        self,
        scenarios: int = DEFAULT_SCENARIOS,
        rng: np.random.Generator | None = None,
    ):
        if scenarios <= 0:
            raise ValueError(f"scenarios must be positive, got {scenarios}")
        self.scenarios = scenarios
        self.rng = rng if rng is not None else np.random.default_rng()

    def project(
        self,
        risk_tolerance: str | RiskTolerance,
        horizon_years: int,
        initial_value: float,
        goal_value: float,
    ) -> float:
        """Percent of scenarios whose final value reaches ``goal_value``.

        Args:
            risk_tolerance: low/medium/high; anything else is treated as medium.
            horizon_years: Number of annual compounding steps.
            initial_value: Starting portfolio value.
            goal_value: Target final value.

        Returns:
            Success probability in [0, 100], rounded to two decimals.
        """
        mean, std_dev = RETURN_PROFILES[resolve_risk_tolerance(risk_tolerance)]
        z = self._standard_normal((self.scenarios, max(horizon_years, 0)))
        final_values = initial_value * np.prod(1 + mean + z * std_dev, axis=1)
        successes = int(np.count_nonzero(final_values >= goal_value))
        return round(successes / self.scenarios * 100, 2)

    def project_all(
        self, holdings: list[HoldingRecord], goals: UserGoalProfile
    ) -> SuccessProbabilities:
        """Success probabilities for every risk profile and standard horizon.

        The starting value is the exercise cost of vested shares across all
        holdings; the goal is ``retirement_age * GOAL_PER_RETIREMENT_YEAR``.
        """
        initial_value = sum(h.vested * h.exercise_price for h in holdings)
        goal_value = goals.retirement_age * GOAL_PER_RETIREMENT_YEAR
        logger.info(
            "Projecting %d holdings: initial=%.2f goal=%.2f scenarios=%d",
            len(holdings),
            initial_value,
            goal_value,
            self.scenarios,
        )

        results: dict[str, dict[str, float]] = {}
        for risk in RiskTolerance:
            results[f"{risk.value}_risk"] = {
                f"year{horizon}": self.project(risk, horizon, initial_value, goal_value)
                for horizon in PROJECTION_HORIZONS
            }
        return SuccessProbabilities(**results)

    def _standard_normal(self, shape: tuple[int, int]) -> np.ndarray:
        # 1 - random() lies in (0, 1], keeping the log finite
        u1 = 1.0 - self.rng.random(shape)
        u2 = self.rng.random(shape)
        return np.sqrt(-2.0 * np.log(u1)) * np.cos(2.0 * np.pi * u2)

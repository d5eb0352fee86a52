"""User goal profile and holdings analytics summary."""

from pydantic import BaseModel, Field

from esopplan.models.enums import PlanningRegion

DEFAULT_SAVINGS_RATE = 30.0


class UserGoalProfile(BaseModel):
    """Age, income and retirement goals used to tailor recommendations."""

    current_age: int = 35
    retirement_age: int = 60
    investment_horizon: int = 10
    monthly_income: float = 100000
    monthly_expenses: float = 50000
    planning_region: PlanningRegion = PlanningRegion.US

    @property
    def savings_rate(self) -> float:
        """Percent of income saved each month; 30 when income is not positive."""
        if self.monthly_income <= 0:
            return DEFAULT_SAVINGS_RATE
        return (self.monthly_income - self.monthly_expenses) / self.monthly_income * 100

    @property
    def years_to_retirement(self) -> int:
        return self.retirement_age - self.current_age

    @property
    def has_retirement_focus(self) -> bool:
        return self.current_age > 45 or self.years_to_retirement < 15


class AnalyticsSummary(BaseModel):
    """Aggregate view of an owner's ESOP holdings."""

    total_value: float = 0.0
    total_vested_shares: int = 0
    total_unvested_shares: int = 0
    percent_of_portfolio: float | None = None
    high_concentration: bool = False
    holdings_count: int = Field(default=0, ge=0)

"""Enumerations for ESOP Planner."""

from enum import StrEnum


class RiskTolerance(StrEnum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Position in the low < medium < high ordering."""
        return _RISK_ORDER[self]


_RISK_ORDER = {
    RiskTolerance.LOW: 0,
    RiskTolerance.MEDIUM: 1,
    RiskTolerance.HIGH: 2,
}


class PlanningRegion(StrEnum):
    US = "us"
    INDIA = "india"


class HoldingStatus(StrEnum):
    EXERCISED = "Exercised"
    NOT_EXERCISED = "Not exercised"


class IngestionPhase(StrEnum):
    PARSING = "parsing"
    PENDING_DELETE = "pending_delete"
    DELETED = "deleted"
    INSERTING = "inserting"
    COMMITTED = "committed"


def resolve_risk_tolerance(value: str | RiskTolerance | None) -> RiskTolerance:
    """Map a free-form tag to a RiskTolerance. Unknown tags become MEDIUM."""
    if isinstance(value, RiskTolerance):
        return value
    try:
        return RiskTolerance(str(value).strip().lower())
    except ValueError:
        return RiskTolerance.MEDIUM


def resolve_region(value: str | PlanningRegion | None) -> PlanningRegion:
    """Map a free-form tag to a PlanningRegion. Unknown tags become US."""
    if isinstance(value, PlanningRegion):
        return value
    try:
        return PlanningRegion(str(value).strip().lower())
    except ValueError:
        return PlanningRegion.US

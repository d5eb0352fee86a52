"""Canonical equity-grant holding record."""

from datetime import datetime
from uuid import uuid4

from pydantic import BaseModel, Field

from esopplan.models.enums import HoldingStatus

UNKNOWN_TICKER = "N/A"
DEFAULT_INSTRUMENT_TYPE = "ISO"
DEFAULT_VESTING_SCHEDULE = "Standard"


class HoldingRecord(BaseModel):
    """One equity-grant lot owned by a single user.

    Vested and unvested counts are kept exactly as supplied; they are not
    required to add up to ``total_grants``.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    owner_id: str
    grant_date: datetime | None = None
    expiration_date: datetime | None = None
    exercise_date: datetime | None = None
    exercise_price: float = Field(default=0.0, ge=0)
    total_grants: int = 0
    vested: int = 0
    unvested: int = 0
    exercised: int = 0
    ticker: str = Field(default=UNKNOWN_TICKER, min_length=1)
    type: str = DEFAULT_INSTRUMENT_TYPE
    vesting_schedule: str = DEFAULT_VESTING_SCHEDULE
    status: HoldingStatus = HoldingStatus.NOT_EXERCISED
    notes: str = ""
    # Legacy names still read by older consumers
    quantity: int = 0
    price: float = 0.0

    @property
    def vested_cost(self) -> float:
        return self.vested * self.exercise_price

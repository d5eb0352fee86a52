"""Row normalization: arbitrary spreadsheet rows to HoldingRecord.

Every canonical field has an ordered list of accepted column names and a
default. Malformed values are defaulted rather than rejected, so
``normalize_row`` always returns a record.
"""

import math
import re
from collections.abc import Mapping
from typing import Any

from esopplan.models.enums import HoldingStatus
from esopplan.models.holding import (
    DEFAULT_INSTRUMENT_TYPE,
    DEFAULT_VESTING_SCHEDULE,
    UNKNOWN_TICKER,
    HoldingRecord,
)
from esopplan.normalization.dates import parse_date

# Column aliases, checked in order; the first present, non-empty value wins
FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "total_grants": ("totalGrants", "total_grants", "grants", "Total Grants"),
    "vested": ("vested", "Vested"),
    "unvested": ("unvested", "Unvested"),
    "exercised": ("exercised", "Exercised"),
    "exercise_price": ("exercisePrice", "exercise_price", "price", "Exercise Price"),
    "grant_date": ("grantDate", "grant_date", "Grant Date"),
    "expiration_date": ("expirationDate", "expiration_date", "Expiration Date"),
    "exercise_date": ("exerciseDate", "exercise_date", "Exercise Date"),
    "vesting_schedule": ("vestingSchedule", "vesting_schedule", "Vesting Schedule"),
    "ticker": ("ticker", "symbol", "Ticker"),
    "type": ("type", "option_type"),
    "notes": ("notes", "comments"),
}

_INT_PATTERN = re.compile(r"^\s*([+-]?\d+)")
_FLOAT_PATTERN = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

# Counts outside a signed 64-bit integer cannot be stored; they read as 0
MAX_COUNT = 2**63 - 1


def resolve_field(row: Mapping[str, Any], field: str) -> Any | None:
    """Return the first present, non-empty value among a field's aliases."""
    for key in FIELD_ALIASES[field]:
        value = row.get(key)
        if value is None:
            continue
        if isinstance(value, str) and not value.strip():
            continue
        return value
    return None


def to_int(value: Any) -> int:
    """Leading base-10 integer of a value; 0 when there is none.

    Thousands separators are dropped first, so ``"1,500"`` reads as 1500.
    Fractional input truncates: ``"40.7"`` reads as 40. Values beyond
    ``MAX_COUNT`` in either direction read as 0.
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) else 0
    else:
        m = _INT_PATTERN.match(str(value).replace(",", ""))
        try:
            number = int(m.group(1)) if m else 0
        except ValueError:
            # Exceeds the interpreter's digit limit for int()
            number = 0
    return number if -MAX_COUNT <= number <= MAX_COUNT else 0


def to_price(value: Any) -> float:
    """Leading decimal number of a value; 0.0 when missing, invalid or negative."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).replace(",", "").replace("$", "")
        m = _FLOAT_PATTERN.match(text)
        if not m:
            return 0.0
        number = float(m.group(1))
    if not math.isfinite(number) or number < 0:
        return 0.0
    return number


def _to_text(value: Any, default: str) -> str:
    if value is None:
        return default
    return str(value).strip() or default


def normalize_row(row: Mapping[str, Any], owner_id: str) -> HoldingRecord:
    """Convert one raw spreadsheet row into a HoldingRecord."""
    total_grants = to_int(resolve_field(row, "total_grants"))
    exercised = to_int(resolve_field(row, "exercised"))
    exercise_price = to_price(resolve_field(row, "exercise_price"))
    ticker = _to_text(resolve_field(row, "ticker"), UNKNOWN_TICKER).upper()

    return HoldingRecord(
        owner_id=owner_id,
        grant_date=parse_date(resolve_field(row, "grant_date")),
        expiration_date=parse_date(resolve_field(row, "expiration_date")),
        exercise_date=parse_date(resolve_field(row, "exercise_date")),
        exercise_price=exercise_price,
        total_grants=total_grants,
        vested=to_int(resolve_field(row, "vested")),
        unvested=to_int(resolve_field(row, "unvested")),
        exercised=exercised,
        ticker=ticker,
        type=_to_text(resolve_field(row, "type"), DEFAULT_INSTRUMENT_TYPE),
        vesting_schedule=_to_text(
            resolve_field(row, "vesting_schedule"), DEFAULT_VESTING_SCHEDULE
        ),
        status=HoldingStatus.EXERCISED if exercised > 0 else HoldingStatus.NOT_EXERCISED,
        notes=_to_text(resolve_field(row, "notes"), ""),
        quantity=total_grants,
        price=exercise_price,
    )

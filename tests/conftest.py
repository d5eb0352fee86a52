"""Shared test fixtures for ESOP Planner."""

import csv
from datetime import datetime
from pathlib import Path

import pytest

from esopplan.db.repository import HoldingRepository
from esopplan.db.schema import create_schema
from esopplan.models.enums import HoldingStatus, PlanningRegion
from esopplan.models.holding import HoldingRecord
from esopplan.models.profile import UserGoalProfile

CSV_HEADER = [
    "totalGrants",
    "vested",
    "unvested",
    "exercised",
    "exercisePrice",
    "grantDate",
    "expirationDate",
    "ticker",
    "type",
    "notes",
]


@pytest.fixture
def sample_holding() -> HoldingRecord:
    return HoldingRecord(
        owner_id="user-1",
        grant_date=datetime(2021, 3, 15),
        expiration_date=datetime(2031, 3, 15),
        exercise_price=10.0,
        total_grants=1000,
        vested=600,
        unvested=400,
        exercised=0,
        ticker="ACME",
        status=HoldingStatus.NOT_EXERCISED,
        quantity=1000,
        price=10.0,
    )


@pytest.fixture
def sample_holdings(sample_holding: HoldingRecord) -> list[HoldingRecord]:
    second = HoldingRecord(
        owner_id="user-1",
        grant_date=datetime(2023, 1, 2),
        exercise_price=25.0,
        total_grants=200,
        vested=50,
        unvested=150,
        exercised=50,
        ticker="ACME",
        type="NSO",
        status=HoldingStatus.EXERCISED,
        quantity=200,
        price=25.0,
    )
    return [sample_holding, second]


@pytest.fixture
def goal_profile() -> UserGoalProfile:
    return UserGoalProfile(
        current_age=30,
        retirement_age=60,
        investment_horizon=10,
        monthly_income=100000,
        monthly_expenses=50000,
        planning_region=PlanningRegion.US,
    )


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "test.db"


@pytest.fixture
def repo(db_path: Path):
    conn = create_schema(db_path)
    yield HoldingRepository(conn)
    conn.close()


@pytest.fixture
def write_csv(tmp_path: Path):
    """Write rows (dicts keyed by CSV_HEADER columns) to a CSV file."""

    def _write(rows: list[dict], name: str = "grants.csv", header=None) -> Path:
        path = tmp_path / name
        with path.open("w", newline="", encoding="utf-8") as fh:
            writer = csv.DictWriter(fh, fieldnames=header or CSV_HEADER)
            writer.writeheader()
            for row in rows:
                writer.writerow(row)
        return path

    return _write


@pytest.fixture
def grants_csv(write_csv) -> Path:
    return write_csv(
        [
            {
                "totalGrants": "1,000",
                "vested": "600",
                "unvested": "400",
                "exercised": "0",
                "exercisePrice": "$10.00",
                "grantDate": "03/15/2021",
                "expirationDate": "2031-03-15",
                "ticker": "acme",
                "type": "ISO",
                "notes": "",
            },
            {
                "totalGrants": "200",
                "vested": "50",
                "unvested": "150",
                "exercised": "50",
                "exercisePrice": "25",
                "grantDate": "02-01-2023",
                "expirationDate": "",
                "ticker": "ACME",
                "type": "NSO",
                "notes": "refresh grant",
            },
        ]
    )

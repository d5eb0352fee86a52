"""SQLite-backed holding store."""

import sqlite3
from datetime import datetime

from esopplan.ingestion.base import HoldingStore
from esopplan.models.enums import HoldingStatus
from esopplan.models.holding import HoldingRecord

_COLUMNS = (
    "id",
    "owner_id",
    "grant_date",
    "expiration_date",
    "exercise_date",
    "exercise_price",
    "total_grants",
    "vested",
    "unvested",
    "exercised",
    "ticker",
    "type",
    "vesting_schedule",
    "status",
    "notes",
    "quantity",
    "price",
)

_DATE_COLUMNS = ("grant_date", "expiration_date", "exercise_date")


class HoldingRepository(HoldingStore):
    """Holdings keyed by owner. Every call commits on its own."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def find_count_by_owner(self, owner_id: str) -> int:
        cursor = self.conn.execute(
            "SELECT COUNT(*) FROM holdings WHERE owner_id = ?", (owner_id,)
        )
        return cursor.fetchone()[0]

    def delete_all_by_owner(self, owner_id: str) -> int:
        cursor = self.conn.execute(
            "DELETE FROM holdings WHERE owner_id = ?", (owner_id,)
        )
        self.conn.commit()
        return cursor.rowcount

    def insert_many(self, records: list[HoldingRecord]) -> list[HoldingRecord]:
        placeholders = ", ".join("?" for _ in _COLUMNS)
        try:
            self.conn.executemany(
                f"INSERT INTO holdings ({', '.join(_COLUMNS)}) VALUES ({placeholders})",
                [self._to_row(record) for record in records],
            )
            self.conn.commit()
        except Exception:
            self.conn.rollback()
            raise
        return list(records)

    def get_holdings(self, owner_id: str) -> list[HoldingRecord]:
        cursor = self.conn.execute(
            f"SELECT {', '.join(_COLUMNS)} FROM holdings WHERE owner_id = ? ORDER BY seq",
            (owner_id,),
        )
        return [self._from_row(dict(zip(_COLUMNS, row))) for row in cursor.fetchall()]

    @staticmethod
    def _to_row(record: HoldingRecord) -> tuple:
        data = record.model_dump()
        for column in _DATE_COLUMNS:
            value = data[column]
            data[column] = value.isoformat() if value else None
        data["status"] = record.status.value
        return tuple(data[column] for column in _COLUMNS)

    @staticmethod
    def _from_row(row: dict) -> HoldingRecord:
        for column in _DATE_COLUMNS:
            if row[column]:
                row[column] = datetime.fromisoformat(row[column])
        row["status"] = HoldingStatus(row["status"])
        return HoldingRecord(**row)

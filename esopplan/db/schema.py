"""SQLite database schema definition."""

import sqlite3
from pathlib import Path

SCHEMA_VERSION = 1

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY,
    applied_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE TABLE IF NOT EXISTS holdings (
    seq INTEGER PRIMARY KEY AUTOINCREMENT,
    id TEXT NOT NULL UNIQUE,
    owner_id TEXT NOT NULL,
    grant_date TEXT,
    expiration_date TEXT,
    exercise_date TEXT,
    exercise_price REAL NOT NULL DEFAULT 0,
    total_grants INTEGER NOT NULL DEFAULT 0,
    vested INTEGER NOT NULL DEFAULT 0,
    unvested INTEGER NOT NULL DEFAULT 0,
    exercised INTEGER NOT NULL DEFAULT 0,
    ticker TEXT NOT NULL,
    type TEXT NOT NULL,
    vesting_schedule TEXT NOT NULL,
    status TEXT NOT NULL,
    notes TEXT NOT NULL DEFAULT '',
    quantity INTEGER NOT NULL DEFAULT 0,
    price REAL NOT NULL DEFAULT 0,
    created_at TEXT NOT NULL DEFAULT (datetime('now'))
);

CREATE INDEX IF NOT EXISTS idx_holdings_owner ON holdings(owner_id);
"""


def create_schema(db_path: Path | str) -> sqlite3.Connection:
    """Create the database schema. Returns the connection."""
    conn = sqlite3.connect(str(db_path))
    conn.execute("PRAGMA journal_mode=WAL")
    conn.executescript(SCHEMA_SQL)
    conn.execute(
        "INSERT OR IGNORE INTO schema_version (version) VALUES (?)",
        (SCHEMA_VERSION,),
    )
    conn.commit()
    return conn

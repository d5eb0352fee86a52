"""Database layer for ESOP Planner."""

from esopplan.db.repository import HoldingRepository
from esopplan.db.schema import create_schema

__all__ = ["HoldingRepository", "create_schema"]

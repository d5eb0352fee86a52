"""ESOP Planner: equity-grant ingestion and planning analytics."""

__version__ = "0.1.0"

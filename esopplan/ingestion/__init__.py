"""Ingestion of uploaded equity-grant spreadsheets."""

from esopplan.ingestion.base import HoldingStore, IngestResult
from esopplan.ingestion.csv_pipeline import IngestionPipeline

__all__ = ["HoldingStore", "IngestResult", "IngestionPipeline"]

"""Normalization of raw spreadsheet input into canonical holdings."""

from esopplan.normalization.dates import parse_date
from esopplan.normalization.records import normalize_row

__all__ = ["normalize_row", "parse_date"]

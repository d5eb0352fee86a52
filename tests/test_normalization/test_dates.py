"""Tests for loose date parsing."""

import logging
from datetime import datetime

import pytest

from esopplan.normalization.dates import parse_date


class TestParseDate:
    def test_iso_date(self):
        assert parse_date("2024-03-15") == datetime(2024, 3, 15)

    def test_iso_datetime(self):
        assert parse_date("2024-03-15T10:30:00") == datetime(2024, 3, 15, 10, 30)

    def test_textual_month(self):
        assert parse_date("March 15, 2024") == datetime(2024, 3, 15)
        assert parse_date("15 Mar 2024") == datetime(2024, 3, 15)

    def test_slash_is_month_first(self):
        assert parse_date("03/15/2024") == datetime(2024, 3, 15)
        assert parse_date("01/02/2023") == datetime(2023, 1, 2)

    def test_dash_is_day_first(self):
        assert parse_date("15-03-2024") == datetime(2024, 3, 15)
        assert parse_date("02-01-2023") == datetime(2023, 1, 2)

    def test_year_first_slash(self):
        assert parse_date("2024/03/15") == datetime(2024, 3, 15)

    def test_two_digit_year_is_twentieth_century(self):
        assert parse_date("03/15/24") == datetime(1924, 3, 15)

    def test_surrounding_whitespace(self):
        assert parse_date("  03/15/2024 ") == datetime(2024, 3, 15)

    def test_datetime_passes_through(self):
        value = datetime(2020, 5, 1)
        assert parse_date(value) is value

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_missing(self, value):
        assert parse_date(value) is None

    @pytest.mark.parametrize(
        "value",
        [
            "not a date",
            "13/45/2024",
            "31-02-2024",
            "1/2",
            "aa/bb/cccc",
            "01/01/99999999999999999999",
            "15-03-99999999999999999999",
            "99999999999999999999/01/2024",
            "01/01/10000",
        ],
    )
    def test_unparseable_returns_none(self, value):
        assert parse_date(value) is None

    def test_failure_is_logged(self, caplog):
        with caplog.at_level(logging.WARNING, logger="esopplan.normalization.dates"):
            parse_date("garbage")
        assert "Failed to parse date string" in caplog.text

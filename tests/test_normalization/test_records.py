"""Tests for spreadsheet row normalization."""

from datetime import datetime

import pytest

from esopplan.models.enums import HoldingStatus
from esopplan.normalization.records import (
    normalize_row,
    resolve_field,
    to_int,
    to_price,
)


class TestToInt:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("100", 100),
            ("1,500", 1500),
            ("40.7", 40),
            ("  12 shares", 12),
            ("-3", -3),
            ("abc", 0),
            ("", 0),
            (None, 0),
            (7, 7),
            (7.9, 7),
            (float("nan"), 0),
            (True, 0),
            ("99999999999999999999", 0),
            ("-99999999999999999999", 0),
            ("9" * 5000, 0),
            (2**63, 0),
            (2**63 - 1, 2**63 - 1),
            (1e30, 0),
        ],
    )
    def test_values(self, value, expected):
        assert to_int(value) == expected


class TestToPrice:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2.50", 2.5),
            ("$1,234.50", 1234.5),
            (".75", 0.75),
            ("1e3", 1000.0),
            ("-1", 0.0),
            ("nan", 0.0),
            ("free", 0.0),
            (None, 0.0),
            (12, 12.0),
            (float("inf"), 0.0),
            ("1e999", 0.0),
        ],
    )
    def test_values(self, value, expected):
        assert to_price(value) == expected


class TestResolveField:
    def test_first_alias_wins(self):
        row = {"totalGrants": "10", "grants": "20"}
        assert resolve_field(row, "total_grants") == "10"

    def test_blank_alias_is_skipped(self):
        row = {"totalGrants": "", "total_grants": "  ", "grants": "7"}
        assert resolve_field(row, "total_grants") == "7"

    def test_absent(self):
        assert resolve_field({}, "ticker") is None


class TestNormalizeRow:
    def test_minimal_row(self):
        row = {"totalGrants": "100", "vested": "40", "exercised": "0", "ticker": "abc"}
        record = normalize_row(row, "user-1")

        assert record.owner_id == "user-1"
        assert record.total_grants == 100
        assert record.vested == 40
        assert record.unvested == 0
        assert record.exercised == 0
        assert record.ticker == "ABC"
        assert record.status == HoldingStatus.NOT_EXERCISED
        assert record.type == "ISO"
        assert record.vesting_schedule == "Standard"
        assert record.exercise_price == 0.0
        assert record.notes == ""
        assert record.grant_date is None

    def test_exercised_status(self):
        record = normalize_row({"totalGrants": "10", "exercised": "5"}, "u")
        assert record.status == HoldingStatus.EXERCISED

    def test_display_style_headers(self):
        row = {
            "Total Grants": "1,500",
            "Vested": "500",
            "Unvested": "1000",
            "Exercise Price": "$2.50",
            "Grant Date": "01/02/2023",
            "Vesting Schedule": "4y/1y cliff",
            "symbol": "xyz",
            "option_type": "NSO",
            "comments": "first grant",
        }
        record = normalize_row(row, "u")

        assert record.total_grants == 1500
        assert record.vested == 500
        assert record.unvested == 1000
        assert record.exercise_price == 2.5
        assert record.grant_date == datetime(2023, 1, 2)
        assert record.vesting_schedule == "4y/1y cliff"
        assert record.ticker == "XYZ"
        assert record.type == "NSO"
        assert record.notes == "first grant"

    def test_missing_ticker_is_sentinel(self):
        assert normalize_row({"totalGrants": "1"}, "u").ticker == "N/A"

    def test_legacy_fields_mirror_canonical(self):
        record = normalize_row({"grants": "30", "price": "4.2"}, "u")
        assert record.quantity == 30
        assert record.price == 4.2

    def test_counts_are_not_reconciled(self):
        row = {"totalGrants": "100", "vested": "70", "unvested": "70"}
        record = normalize_row(row, "u")
        assert (record.total_grants, record.vested, record.unvested) == (100, 70, 70)

    def test_unparseable_date_is_none(self):
        record = normalize_row({"grantDate": "someday", "expirationDate": "15-03-2030"}, "u")
        assert record.grant_date is None
        assert record.expiration_date == datetime(2030, 3, 15)

    def test_every_row_gets_its_own_id(self):
        a = normalize_row({"ticker": "A"}, "u")
        b = normalize_row({"ticker": "A"}, "u")
        assert a.id != b.id

    def test_garbage_row_still_normalizes(self):
        record = normalize_row({"totalGrants": "lots", "exercisePrice": "n/a", "x": "y"}, "u")
        assert record.total_grants == 0
        assert record.exercise_price == 0.0
        assert record.status == HoldingStatus.NOT_EXERCISED

    def test_oversized_values_default(self):
        row = {
            "totalGrants": "99999999999999999999",
            "vested": "1" * 40,
            "grantDate": "15-03-99999999999999999999",
            "exercisePrice": "1e999",
        }
        record = normalize_row(row, "u")
        assert record.total_grants == 0
        assert record.quantity == 0
        assert record.vested == 0
        assert record.grant_date is None
        assert record.exercise_price == 0.0

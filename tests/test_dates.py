"""
Tests for utils/dates.py.
"""

import sys
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from todofiles.utils.dates import days_between, format_date, parse_date, parse_iso_date

# A Friday
TODAY = date(2024, 3, 1)


class TestParseIsoDate:
    def test_valid(self):
        assert parse_iso_date("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize("value", [None, "", "2024-02-30", "2023-02-29", "2024-1-5", "20240105", "2024-01-05x"])
    def test_invalid(self, value):
        assert parse_iso_date(value) is None


class TestFormatDate:
    def test_format(self):
        assert format_date(date(2024, 1, 5)) == "2024-01-05"

    def test_none(self):
        assert format_date(None) == ""


class TestDaysBetween:
    def test_signed(self):
        assert days_between(date(2024, 1, 10), date(2024, 1, 13)) == 3
        assert days_between(date(2024, 1, 10), date(2024, 1, 9)) == -1
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == 2


class TestParseDate:
    @pytest.mark.parametrize("text,expected", [
        ("today", date(2024, 3, 1)),
        ("Tomorrow", date(2024, 3, 2)),
        ("yesterday", date(2024, 2, 29)),
        ("2024-12-25", date(2024, 12, 25)),
        ("monday", date(2024, 3, 4)),
        ("friday", date(2024, 3, 8)),
        ("next saturday", date(2024, 3, 9)),
        ("in 3 days", date(2024, 3, 4)),
        ("in 1 week", date(2024, 3, 8)),
        ("in 2 weeks", date(2024, 3, 15)),
    ])
    def test_forms(self, text, expected):
        assert parse_date(text, TODAY) == expected

    @pytest.mark.parametrize("text", ["", "someday", "2024-02-30", "in a while"])
    def test_unparseable(self, text):
        assert parse_date(text, TODAY) is None

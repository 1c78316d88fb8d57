"""
Unit tests for date and time helpers.
"""

import datetime as dt

import pytest

from daily_record.core.errors import ValidationError
from daily_record.core.timeutils import (
    duration_minutes,
    format_duration,
    normalize_date,
    normalize_time,
    parse_time,
    validate_date_range,
)


class TestTimeParsing:
    """Tests for time-of-day parsing."""

    def test_accepts_hours_and_minutes(self):
        assert parse_time("08:05") == (8, 5, 0)

    def test_accepts_seconds(self):
        assert parse_time("23:59:30") == (23, 59, 30)

    def test_accepts_time_objects(self):
        assert parse_time(dt.time(7, 15)) == (7, 15, 0)

    def test_normalizes_to_seconds_form(self):
        assert normalize_time("8:05") == "08:05:00"

    @pytest.mark.parametrize("value", ["24:00", "12:60", "noon", "", None, "12:00:61", "1200"])
    def test_rejects_malformed_times(self, value):
        with pytest.raises(ValidationError):
            parse_time(value)


class TestDates:
    """Tests for date normalization."""

    def test_plain_date(self):
        assert normalize_date("2024-03-05") == "2024-03-05"

    def test_timestamp_is_truncated(self):
        assert normalize_date("2024-03-05T00:00:00.000Z") == "2024-03-05"

    def test_rejects_impossible_date(self):
        with pytest.raises(ValidationError):
            normalize_date("2024-02-30")

    def test_range_rejects_inverted_dates(self):
        with pytest.raises(ValidationError):
            validate_date_range("2024-03-06", "2024-03-05")

    def test_range_allows_single_day(self):
        assert validate_date_range("2024-03-05", "2024-03-05") == ("2024-03-05", "2024-03-05")


class TestDuration:
    """Tests for duration helpers."""

    def test_same_day(self):
        assert duration_minutes("08:00", "09:30") == 90

    def test_wraps_over_midnight(self):
        assert duration_minutes("23:00", "01:00") == 120

    def test_format_hours_and_minutes(self):
        assert format_duration("08:00", "09:30") == "1小时30分钟"

    def test_format_whole_hours(self):
        assert format_duration("08:00", "10:00") == "2小时"

    def test_format_minutes_only(self):
        assert format_duration("08:00", "08:15") == "15分钟"

"""
Unit tests for the event layout engine.
"""

import pytest

from daily_record.core.errors import ValidationError
from daily_record.core.layout import event_color, event_segments, layout_day, name_hash
from daily_record.models import Event


def _event(start, end, name="Work", event_id=1):
    return {"id": event_id, "date": "2024-03-05", "start_time": start,
            "end_time": end, "event_name": name, "notes": ""}


def _hours_with_segments(layout):
    return [h.hour for h in layout.hours if h.segments]


# ==================== Segment Tests ====================


class TestEventSegments:
    """Tests for splitting one event into hour segments."""

    @pytest.mark.parametrize("start,end", [("08:10", "08:40"), ("00:00", "00:59"), ("13:05:00", "13:05:00")])
    def test_single_hour_event_has_one_exact_segment(self, start, end):
        segments = event_segments(_event(start, end))

        hour = int(start[:2])
        assert list(segments) == [hour]
        assert segments[hour].start_minute == int(start[3:5])
        assert segments[hour].end_minute == int(end[3:5])

    def test_last_minute_of_day(self):
        segments = event_segments(_event("23:00", "23:59"))

        assert list(segments) == [23]
        assert segments[23].start_minute == 0
        assert segments[23].end_minute == 59

    def test_event_ending_on_the_hour_does_not_spill(self):
        segments = event_segments(_event("08:00", "10:00"))

        assert sorted(segments) == [8, 9]
        assert (segments[8].start_minute, segments[8].end_minute) == (0, 59)
        assert (segments[9].start_minute, segments[9].end_minute) == (0, 59)

    def test_multi_hour_event_with_partial_edges(self):
        segments = event_segments(_event("08:20", "10:15"))

        assert sorted(segments) == [8, 9, 10]
        assert (segments[8].start_minute, segments[8].end_minute) == (20, 59)
        assert (segments[9].start_minute, segments[9].end_minute) == (0, 59)
        assert (segments[10].start_minute, segments[10].end_minute) == (0, 15)

    def test_zero_length_event_on_the_hour_is_kept(self):
        segments = event_segments(_event("09:00", "09:00"))

        assert list(segments) == [9]

    @pytest.mark.parametrize("start,end", [("08:40", "08:10"), ("22:00", "01:00")])
    def test_event_ending_before_it_starts_has_no_segments(self, start, end):
        assert event_segments(_event(start, end)) == {}

    def test_position_is_fraction_of_the_hour(self):
        segment = event_segments(_event("08:15", "08:44"))[8]

        assert segment.left == pytest.approx(25.0)
        assert segment.width == pytest.approx(50.0)

    def test_segment_carries_event_identity(self):
        segment = event_segments(_event("08:15", "08:44", name="Reading", event_id=42))[8]

        assert segment.event_id == 42
        assert segment.label == "Reading"

    def test_accepts_event_models(self):
        event = Event(id=3, date="2024-03-05", start_time="07:00:00",
                      end_time="07:30:00", event_name="Walk")

        assert list(event_segments(event)) == [7]

    def test_malformed_time_raises(self):
        with pytest.raises(ValidationError):
            event_segments(_event("8h", "09:00"))


# ==================== Day Layout Tests ====================


class TestLayoutDay:
    """Tests for the 24 hour grid."""

    def test_always_has_24_hours(self):
        layout = layout_day([])

        assert [h.hour for h in layout.hours] == list(range(24))
        assert _hours_with_segments(layout) == []

    def test_overlapping_events_are_not_merged(self):
        layout = layout_day([
            _event("08:00", "08:30", name="A", event_id=1),
            _event("08:15", "08:45", name="B", event_id=2),
        ])

        segments = layout.hours[8].segments
        assert [s.event_id for s in segments] == [1, 2]
        assert [(s.start_minute, s.end_minute) for s in segments] == [(0, 30), (15, 45)]

    def test_spanning_event_appears_in_each_hour(self):
        layout = layout_day([_event("14:00", "16:30")], date="2024-03-05")

        assert layout.date == "2024-03-05"
        assert _hours_with_segments(layout) == [14, 15, 16]


# ==================== Colour Tests ====================


class TestEventColor:
    """Tests for event name colours."""

    def test_hash_is_deterministic(self):
        assert name_hash("Reading") == name_hash("Reading")
        assert name_hash("") == 0

    def test_hash_fits_signed_32_bits(self):
        value = name_hash("a much longer event name that overflows" * 4)

        assert -(2 ** 31) <= value < 2 ** 31

    def test_color_shade_depends_on_hour(self):
        assert event_color("Reading", 0) == event_color("Reading", 0)
        assert event_color("Reading", 0).startswith("hsla(")
        assert "30%, 60%" in event_color("Reading", 0)
        assert "40%, 70%" in event_color("Reading", 1)

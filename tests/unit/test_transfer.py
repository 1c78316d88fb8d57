"""
Unit tests for export and deduplicating import.
"""

import json

import pytest

from daily_record.core.converter import encode_json, encode_markdown
from daily_record.core.errors import ValidationError
from daily_record.core.transfer import export_events, import_file, import_records
from daily_record.models import ExportFile


# ==================== Import ====================


class TestImportRecords:
    """Tests for importing records into the store."""

    def test_new_records_are_inserted(self, db, sample_events):
        result = import_records(db, sample_events)

        assert (result.imported, result.skipped, result.failed, result.total) == (6, 0, 0, 6)
        assert len(db.get_events_in_range()) == 6

    def test_identical_record_is_skipped(self, db, add_event):
        add_event("2024-03-05", "08:00:00", "09:00:00", "Running")

        result = import_records(db, [{
            "date": "2024-03-05", "start_time": "08:00:00",
            "end_time": "09:00:00", "event_name": "Running", "notes": "different notes",
        }])

        assert result.skipped == 1
        assert result.imported == 0
        assert len(db.get_events_in_range()) == 1

    def test_timestamp_dates_are_normalized_before_dedup(self, db, add_event):
        add_event("2024-03-05", "08:00:00", "09:00:00", "Running")

        result = import_records(db, [{
            "date": "2024-03-05T00:00:00.000Z", "start_time": "08:00",
            "end_time": "09:00", "event_name": "Running",
        }])

        assert result.skipped == 1

    def test_differing_name_is_not_a_duplicate(self, db, add_event):
        add_event("2024-03-05", "08:00:00", "09:00:00", "Running")

        result = import_records(db, [{
            "date": "2024-03-05", "start_time": "08:00:00",
            "end_time": "09:00:00", "event_name": "Jogging",
        }])

        assert result.imported == 1

    def test_invalid_records_are_counted_as_failed(self, db):
        result = import_records(db, [
            {"date": "2024-03-05", "start_time": "25:00", "end_time": "09:00", "event_name": "Bad"},
            {"date": "2024-03-05", "start_time": "08:00", "end_time": "09:00", "event_name": "   "},
            {"start_time": "08:00"},
            {"date": "2024-03-05", "start_time": "08:00", "end_time": "09:00", "event_name": "Good"},
        ])

        assert (result.imported, result.failed, result.total) == (1, 3, 4)

    def test_imported_names_become_templates(self, db, sample_events):
        import_records(db, sample_events)

        names = [row["name"] for row in db.get_event_templates()]
        assert names == sorted({e["event_name"] for e in sample_events})

    def test_reimporting_an_export_skips_everything(self, db, sample_events):
        import_records(db, sample_events)
        exported = export_events(db, "json")

        result = import_file(db, exported.filename, exported.content)

        assert (result.imported, result.skipped) == (0, 6)


class TestImportFile:
    """Tests for file type handling."""

    def test_markdown_file(self, db, sample_events):
        result = import_file(db, "backup.md", encode_markdown(sample_events))

        assert result.imported == 6

    def test_json_file(self, db, sample_events):
        result = import_file(db, "backup.JSON", encode_json(sample_events))

        assert result.imported == 6

    def test_unsupported_extension(self, db):
        with pytest.raises(ValidationError):
            import_file(db, "backup.csv", "date,start_time")

    def test_malformed_markdown_is_partially_imported(self, db):
        text = "# 2024年\n## 3月\n### 3月5日\n- Broken\n- Fine\n  - 10:00:00 - 11:00:00\n"

        result = import_file(db, "notes.md", text)

        assert (result.imported, result.total) == (1, 1)


# ==================== Export ====================


class TestExportEvents:
    """Tests for rendering exports."""

    def test_filename_from_requested_range(self, db, sample_events):
        import_records(db, sample_events)

        exported = export_events(db, "md", "2024-03-01", "2024-03-31")

        assert exported.filename == "daily_record_2024-03-01_to_2024-03-31.md"
        assert exported.count == 3

    def test_filename_from_stored_dates(self, db, sample_events):
        import_records(db, sample_events)

        exported = export_events(db, "json")

        assert exported.filename == "daily_record_2023-12-31_to_2024-11-02.json"
        assert len(json.loads(exported.content)) == 6

    def test_result_is_an_export_model(self, db):
        exported = export_events(db, "json")

        assert isinstance(exported, ExportFile)
        assert exported.model_dump() == {
            "filename": "daily_record_all.json",
            "content": "[]",
            "media_type": "application/json; charset=utf-8",
            "count": 0,
        }

    def test_empty_store(self, db):
        exported = export_events(db, "md")

        assert exported.filename == "daily_record_all.md"
        assert exported.content == ""

    def test_json_export_is_ordered_by_date_and_time(self, db, sample_events):
        import_records(db, sample_events)

        data = json.loads(export_events(db, "json").content)

        keys = [(e["date"], e["start_time"]) for e in data]
        assert keys == sorted(keys)

    @pytest.mark.parametrize("fmt", ["csv", ""])
    def test_unknown_format(self, db, fmt):
        with pytest.raises(ValidationError):
            export_events(db, fmt)

    def test_half_open_range(self, db):
        with pytest.raises(ValidationError):
            export_events(db, "md", start_date="2024-03-01")

    def test_inverted_range(self, db):
        with pytest.raises(ValidationError):
            export_events(db, "md", "2024-03-02", "2024-03-01")

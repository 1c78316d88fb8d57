"""
Pytest configuration and shared fixtures.
Every test gets its own configuration directory and SQLite database.
"""

import os
import tempfile
from pathlib import Path

# Point the configuration at a throwaway directory before the package is
# imported, since module level loggers read the configuration on import.
_CONFIG_DIR = Path(tempfile.mkdtemp(prefix="daily-record-tests-"))
os.environ["DAILY_RECORD_CONFIG"] = str(_CONFIG_DIR / "config.toml")

import pytest  # noqa: E402

from daily_record.core import db as db_module  # noqa: E402
from daily_record.core import events as events_module  # noqa: E402
from daily_record.core.db import DatabaseManager  # noqa: E402
from daily_record.core.events import EventBus  # noqa: E402


# ==================== Store Fixtures ====================


@pytest.fixture
def db(tmp_path, monkeypatch):
    """Fresh database installed as the global database manager."""
    manager = DatabaseManager(str(tmp_path / "daily_record.db"))
    monkeypatch.setattr(db_module, "db_manager", manager)
    return manager


@pytest.fixture
def bus(monkeypatch):
    """Fresh global event bus."""
    fresh = EventBus()
    monkeypatch.setattr(events_module, "_event_bus", fresh)
    return fresh


@pytest.fixture
def add_event(db):
    """Insert an event, returning its id."""

    def _add(date, start_time, end_time, event_name, notes=""):
        return db.insert_event(date, start_time, end_time, event_name, notes)

    return _add


# ==================== Data Fixtures ====================


@pytest.fixture
def sample_events():
    """Events spread over two years, several months and hours."""
    return [
        {"id": 1, "date": "2024-03-05", "start_time": "08:00:00", "end_time": "09:00:00",
         "event_name": "Running", "notes": "Along the river"},
        {"id": 2, "date": "2024-03-05", "start_time": "08:30:00", "end_time": "08:45:00",
         "event_name": "Coffee", "notes": ""},
        {"id": 3, "date": "2024-03-05", "start_time": "14:00:00", "end_time": "16:30:00",
         "event_name": "Reading", "notes": ""},
        {"id": 4, "date": "2024-11-02", "start_time": "21:15:00", "end_time": "22:00:00",
         "event_name": "Piano", "notes": "Scales only"},
        {"id": 5, "date": "2024-02-10", "start_time": "07:00:00", "end_time": "07:20:00",
         "event_name": "Running", "notes": ""},
        {"id": 6, "date": "2023-12-31", "start_time": "23:00:00", "end_time": "23:59:00",
         "event_name": "Fireworks", "notes": ""},
    ]

"""
Database schema definitions
Contains all CREATE TABLE and CREATE INDEX statements
"""

# Table creation statements
CREATE_EVENTS_TABLE = """
    CREATE TABLE IF NOT EXISTS events (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        date TEXT NOT NULL,
        start_time TEXT NOT NULL,
        end_time TEXT NOT NULL,
        event_name TEXT NOT NULL,
        notes TEXT DEFAULT '',
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    )
"""

CREATE_EVENT_TEMPLATES_TABLE = """
    CREATE TABLE IF NOT EXISTS event_templates (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL UNIQUE,
        created_at TEXT DEFAULT CURRENT_TIMESTAMP
    )
"""

# Index creation statements
CREATE_EVENTS_DATE_INDEX = """
    CREATE INDEX IF NOT EXISTS idx_events_date
    ON events(date, start_time)
"""

CREATE_EVENTS_NAME_INDEX = """
    CREATE INDEX IF NOT EXISTS idx_events_name
    ON events(event_name)
"""

# All table creation statements in order
ALL_TABLES = [
    CREATE_EVENTS_TABLE,
    CREATE_EVENT_TEMPLATES_TABLE,
]

# All index creation statements
ALL_INDEXES = [
    CREATE_EVENTS_DATE_INDEX,
    CREATE_EVENTS_NAME_INDEX,
]

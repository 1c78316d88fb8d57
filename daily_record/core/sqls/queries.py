"""
Database query SQL statements
Contains all SELECT, INSERT, UPDATE, DELETE statements
"""

# Events queries
INSERT_EVENT = """
    INSERT INTO events (date, start_time, end_time, event_name, notes)
    VALUES (?, ?, ?, ?, ?)
"""

UPDATE_EVENT = """
    UPDATE events
    SET date = ?, start_time = ?, end_time = ?, event_name = ?, notes = ?
    WHERE id = ?
"""

DELETE_EVENT = """
    DELETE FROM events
    WHERE id = ?
"""

SELECT_EVENT_BY_ID = """
    SELECT * FROM events
    WHERE id = ?
"""

SELECT_EVENTS_BY_DATE = """
    SELECT * FROM events
    WHERE date = ?
    ORDER BY start_time, id
"""

SELECT_EVENTS_IN_RANGE = """
    SELECT * FROM events
    WHERE date BETWEEN ? AND ?
    ORDER BY date, start_time, id
"""

SELECT_ALL_EVENTS = """
    SELECT * FROM events
    ORDER BY date, start_time, id
"""

SELECT_DUPLICATE_EVENT = """
    SELECT id FROM events
    WHERE date = ? AND start_time = ? AND end_time = ? AND event_name = ?
    LIMIT 1
"""

SELECT_EVENT_DATE_BOUNDS = """
    SELECT MIN(date) as min_date, MAX(date) as max_date
    FROM events
"""

# Per-event minutes use a full date+time delta, truncated toward zero
SELECT_EVENT_FREQUENCY = """
    SELECT
        event_name,
        COUNT(*) as frequency,
        SUM(
            (CAST(strftime('%s', date || ' ' || end_time) AS INTEGER)
             - CAST(strftime('%s', date || ' ' || start_time) AS INTEGER)) / 60
        ) as total_minutes
    FROM events
    WHERE date BETWEEN ? AND ?
    GROUP BY event_name
    ORDER BY frequency DESC, MIN(id) ASC
"""

# Event templates queries
INSERT_EVENT_TEMPLATE = """
    INSERT INTO event_templates (name)
    VALUES (?)
"""

INSERT_EVENT_TEMPLATE_IF_MISSING = """
    INSERT OR IGNORE INTO event_templates (name)
    VALUES (?)
"""

SELECT_EVENT_TEMPLATES = """
    SELECT id, name FROM event_templates
    ORDER BY name
"""

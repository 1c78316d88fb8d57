"""
SQLite database wrapper
Provides basic operations like connection, query, insert, update
"""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from daily_record.core.errors import ConflictError, StoreError
from daily_record.core.logger import get_logger
from daily_record.core.sqls import queries, schema

logger = get_logger(__name__)


class DatabaseManager:
    """Database manager"""

    def __init__(self, db_path: Optional[str] = None):
        # If no path is provided, use the unified data directory
        if db_path is None:
            from daily_record.core.paths import get_db_path

            db_path = str(get_db_path())

        self.db_path = db_path
        self._init_database()

    def _init_database(self):
        """Initialize database"""
        Path(self.db_path).parent.mkdir(parents=True, exist_ok=True)

        self._create_tables()
        logger.info(f"Database initialization completed: {self.db_path}")

    def _create_tables(self):
        """Create database tables"""
        with self.get_connection() as conn:
            cursor = conn.cursor()

            for table_sql in schema.ALL_TABLES:
                cursor.execute(table_sql)

            for index_sql in schema.ALL_INDEXES:
                cursor.execute(index_sql)

            conn.commit()
            logger.debug("Database table creation completed")

    @contextmanager
    def get_connection(self):
        """Get database connection context manager

        sqlite3 errors raised inside the block are re-raised as StoreError.
        """
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            logger.error(f"Failed to open database {self.db_path}: {e}", exc_info=True)
            raise StoreError("Database unavailable") from e

        conn.row_factory = sqlite3.Row  # Enable column name access for results
        try:
            yield conn
        except sqlite3.IntegrityError:
            raise
        except sqlite3.Error as e:
            logger.error(f"Database operation failed: {e}", exc_info=True)
            raise StoreError("Database operation failed") from e
        finally:
            conn.close()

    def execute_query(self, query: str, params: Tuple = ()) -> List[Dict[str, Any]]:
        """Execute query and return results"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            rows = cursor.fetchall()
            return [dict(row) for row in rows]

    def execute_insert(self, query: str, params: Tuple = ()) -> int:
        """Execute insert operation and return inserted ID"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            conn.commit()
            return cursor.lastrowid or 0

    def execute_update(self, query: str, params: Tuple = ()) -> int:
        """Execute update operation and return affected row count"""
        with self.get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            conn.commit()
            return cursor.rowcount

    def execute_delete(self, query: str, params: Tuple = ()) -> int:
        """Execute delete operation and return affected row count"""
        return self.execute_update(query, params)

    # Event related methods
    def insert_event(
        self,
        date: str,
        start_time: str,
        end_time: str,
        event_name: str,
        notes: str = "",
    ) -> int:
        """Insert event and return its id"""
        params = (date, start_time, end_time, event_name, notes or "")
        return self.execute_insert(queries.INSERT_EVENT, params)

    def update_event(
        self,
        event_id: int,
        date: str,
        start_time: str,
        end_time: str,
        event_name: str,
        notes: str = "",
    ) -> int:
        """Update event, returns affected row count (0 when the id is missing)"""
        params = (date, start_time, end_time, event_name, notes or "", event_id)
        return self.execute_update(queries.UPDATE_EVENT, params)

    def delete_event(self, event_id: int) -> int:
        """Delete event, returns affected row count (0 when the id is missing)"""
        return self.execute_delete(queries.DELETE_EVENT, (event_id,))

    def get_event_by_id(self, event_id: int) -> Optional[Dict[str, Any]]:
        """Get event by ID"""
        results = self.execute_query(queries.SELECT_EVENT_BY_ID, (event_id,))
        return results[0] if results else None

    def get_events_by_date(self, date: str) -> List[Dict[str, Any]]:
        """Get events of one date ordered by start time"""
        return self.execute_query(queries.SELECT_EVENTS_BY_DATE, (date,))

    def get_events_in_range(
        self, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """Get events between two dates (inclusive), or all events when no range is given"""
        if start_date is None or end_date is None:
            return self.execute_query(queries.SELECT_ALL_EVENTS)
        return self.execute_query(queries.SELECT_EVENTS_IN_RANGE, (start_date, end_date))

    def find_duplicate_event(
        self, date: str, start_time: str, end_time: str, event_name: str
    ) -> Optional[int]:
        """Return the id of an event with the same date, times and name"""
        results = self.execute_query(
            queries.SELECT_DUPLICATE_EVENT, (date, start_time, end_time, event_name)
        )
        return results[0]["id"] if results else None

    def get_event_date_bounds(self) -> Tuple[Optional[str], Optional[str]]:
        """Get earliest and latest event dates"""
        results = self.execute_query(queries.SELECT_EVENT_DATE_BOUNDS)
        if not results:
            return None, None
        return results[0]["min_date"], results[0]["max_date"]

    def get_event_frequency(self, start_date: str, end_date: str) -> List[Dict[str, Any]]:
        """Group events in a date range by name with count and total minutes"""
        return self.execute_query(queries.SELECT_EVENT_FREQUENCY, (start_date, end_date))

    # Event template related methods
    def insert_event_template(self, name: str) -> int:
        """Insert event template, raises ConflictError if the name exists"""
        try:
            return self.execute_insert(queries.INSERT_EVENT_TEMPLATE, (name,))
        except sqlite3.IntegrityError as e:
            raise ConflictError(f"Event template already exists: {name}") from e

    def ensure_event_template(self, name: str) -> None:
        """Register a template name unless it is already known"""
        self.execute_insert(queries.INSERT_EVENT_TEMPLATE_IF_MISSING, (name,))

    def get_event_templates(self) -> List[Dict[str, Any]]:
        """Get all event templates ordered by name"""
        return self.execute_query(queries.SELECT_EVENT_TEMPLATES)


# Global database manager instance
db_manager: Optional[DatabaseManager] = None


def get_db() -> DatabaseManager:
    """Get database manager instance

    Read database path from database.path in config.toml,
    use the default data directory if not configured
    """
    global db_manager
    if db_manager is None:
        from daily_record.config.loader import get_config
        from daily_record.core.paths import get_db_path

        config = get_config()

        configured_path = config.get("database.path", "")

        if configured_path and str(configured_path).strip():
            db_path = str(configured_path)
        else:
            db_path = str(get_db_path())

        db_manager = DatabaseManager(db_path)
        logger.info(f"✓ Database manager initialized, path: {db_path}")

    return db_manager

"""
Path utility module
Resolves the data directory, database file and logs directory
"""

from pathlib import Path
from typing import Optional


def ensure_dir(dir_path: Path) -> Path:
    """
    Ensure directory exists, create if it doesn't

    Args:
        dir_path: Directory path

    Returns:
        Directory path
    """
    dir_path = Path(dir_path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def get_data_dir(subdir: Optional[str] = None) -> Path:
    """
    Get data directory (for storing the database and exported files)

    The directory is ~/.config/daily-record, next to the default configuration.

    Args:
        subdir: Optional subdirectory name

    Returns:
        Data directory path
    """
    data_dir = Path.home() / ".config" / "daily-record"
    if subdir:
        data_dir = data_dir / subdir
    return ensure_dir(data_dir)


def get_logs_dir() -> Path:
    """Get logs directory"""
    return get_data_dir("logs")


def get_db_path(db_name: str = "daily_record.db") -> Path:
    """
    Get database file path

    Args:
        db_name: Database file name

    Returns:
        Database file path
    """
    return get_data_dir() / db_name

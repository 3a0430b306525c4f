"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and the
schema bootstrap run on application start (``init_db``).  It uses
SQLite as a lightweight embedded database; to switch to another DBMS
you would replace connection logic and adapt SQL syntax accordingly.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings

SCHEMA = """
CREATE TABLE IF NOT EXISTS commits (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    message TEXT NOT NULL,
    url TEXT NOT NULL,
    author_login TEXT NOT NULL,
    commit_time TIMESTAMP NOT NULL
);

CREATE TABLE IF NOT EXISTS recommendation_requests (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    requester_email TEXT NOT NULL,
    professor_email TEXT NOT NULL,
    explanation TEXT NOT NULL,
    date_requested TIMESTAMP NOT NULL,
    date_needed TIMESTAMP NOT NULL,
    done INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS ucsb_dining_commons_menu_items (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    dining_commons_code TEXT NOT NULL,
    name TEXT NOT NULL,
    station TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS ucsb_dates (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    quarter_yyyyq TEXT NOT NULL,
    name TEXT NOT NULL,
    local_date_time TIMESTAMP NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_ucsb_dates_quarter ON ucsb_dates (quarter_yyyyq);
"""


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the project root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parents[3]
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.  No
    type detection is enabled; timestamps come back as the ISO text
    they were stored as and are parsed by the pydantic models.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only if the block exits normally.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Create any missing tables.  Safe to call repeatedly."""
    with get_cursor() as cursor:
        cursor.executescript(SCHEMA)

"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
schema setup (``init_db``).  SQLite is used as a lightweight embedded
database; to switch to another DBMS you would replace the connection
logic and adapt the SQL in ``UserRepository``.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

MEMORY_URL = ":memory:"

logger = logging.getLogger(__name__)

MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: users table.  AUTOINCREMENT keeps SQLite from
    # handing out the id of a deleted row again.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS users (
            user_id INTEGER PRIMARY KEY AUTOINCREMENT,
            first_name TEXT NOT NULL,
            last_name TEXT NOT NULL,
            email TEXT NOT NULL,
            password TEXT NOT NULL
        );
        """,
    ),
]


def is_memory_database(database_url: str) -> bool:
    return database_url == MEMORY_URL


def get_database_path(database_url: str) -> str:
    """Compute the path to the SQLite database file.

    Absolute paths and ``:memory:`` are returned unchanged.  Relative
    paths are resolved against the project root (the directory that
    contains the ``mobile_app_ws`` package).
    """
    if is_memory_database(database_url) or os.path.isabs(database_url):
        return database_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / database_url).resolve())


def get_connection(database_url: str) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  ``check_same_thread`` is disabled because FastAPI may run a
    request on a different thread from the one that opened a shared
    ``:memory:`` connection.
    """
    db_path = get_database_path(database_url)
    conn = sqlite3.connect(db_path, check_same_thread=False)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_url: str) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection(database_url)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(conn: sqlite3.Connection) -> int:
    """Apply pending migrations on ``conn`` and return the schema version.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries of
    ``MIGRATIONS``.  To change the schema append a migration with an
    incremented version number.
    """
    cursor = conn.cursor()
    cursor.execute(
        "CREATE TABLE IF NOT EXISTS migrations ("
        "version INTEGER PRIMARY KEY, "
        "applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP)"
    )
    row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
    current = row["version"] or 0
    for version, script in MIGRATIONS:
        if version <= current:
            continue
        logger.info("Applying database migration %s", version)
        cursor.executescript(script)
        cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        current = version
    conn.commit()
    return current

"""
SQLite‑backed repository for users.

``UserRepository`` is a thin table gateway keyed on ``user_id``: it
finds, saves and deletes whole records and nothing else.  Ids are
assigned by SQLite on insert.

All queries use parameterized statements.  File databases get a new
connection per operation; a ``:memory:`` database keeps one shared
connection for the repository's lifetime, since closing it would
discard the data.
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from typing import Iterator, List, Optional

from ..core.db import get_connection, get_cursor, init_db, is_memory_database
from ..schemas.user import UserRest

logger = logging.getLogger(__name__)

_COLUMNS = "user_id, first_name, last_name, email, password"


class UserRepository:
    """Table gateway for the ``users`` table."""

    def __init__(self, database_url: str) -> None:
        self.database_url = database_url
        self._lock = threading.Lock()
        self._shared: Optional[sqlite3.Connection] = None
        if is_memory_database(database_url):
            self._shared = get_connection(database_url)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        if self._shared is None:
            with get_cursor(self.database_url) as cursor:
                yield cursor
            return
        with self._lock:
            try:
                yield self._shared.cursor()
                self._shared.commit()
            except Exception:
                self._shared.rollback()
                raise

    def init_schema(self) -> int:
        """Create or migrate the schema; returns the schema version."""
        if self._shared is not None:
            with self._lock:
                version = init_db(self._shared)
        else:
            conn = get_connection(self.database_url)
            try:
                version = init_db(conn)
            finally:
                conn.close()
        logger.info("User repository ready at %s (schema v%s)", self.database_url, version)
        return version

    def close(self) -> None:
        if self._shared is not None:
            self._shared.close()
            self._shared = None

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> UserRest:
        return UserRest(
            user_id=row["user_id"],
            first_name=row["first_name"],
            last_name=row["last_name"],
            email=row["email"],
            password=row["password"],
        )

    async def find_all(self) -> List[UserRest]:
        with self._cursor() as cursor:
            rows = cursor.execute(f"SELECT {_COLUMNS} FROM users ORDER BY user_id").fetchall()
        return [self._row_to_user(row) for row in rows]

    async def find_by_id(self, user_id: int) -> Optional[UserRest]:
        with self._cursor() as cursor:
            row = cursor.execute(
                f"SELECT {_COLUMNS} FROM users WHERE user_id = ?", (user_id,)
            ).fetchone()
        return self._row_to_user(row) if row else None

    async def exists_by_id(self, user_id: int) -> bool:
        with self._cursor() as cursor:
            row = cursor.execute("SELECT 1 FROM users WHERE user_id = ?", (user_id,)).fetchone()
        return row is not None

    async def count(self) -> int:
        with self._cursor() as cursor:
            row = cursor.execute("SELECT COUNT(*) AS count FROM users").fetchone()
        return row["count"]

    async def save(self, user: UserRest) -> UserRest:
        """Insert ``user`` or replace the row with the same primary key.

        A record without ``user_id`` (or with 0) is inserted and the
        returned copy carries the id SQLite assigned.
        """
        values = (user.first_name, user.last_name, user.email, user.password)
        with self._cursor() as cursor:
            if not user.user_id:
                cursor.execute(
                    "INSERT INTO users (first_name, last_name, email, password) VALUES (?, ?, ?, ?)",
                    values,
                )
                user_id = cursor.lastrowid
            else:
                cursor.execute(
                    f"INSERT OR REPLACE INTO users ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                    (user.user_id, *values),
                )
                user_id = user.user_id
        logger.info("Saved user %s", user_id)
        return user.model_copy(update={"user_id": user_id})

    async def delete_by_id(self, user_id: int) -> bool:
        """Delete a row; returns whether one existed."""
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM users WHERE user_id = ?", (user_id,))
            deleted = cursor.rowcount > 0
        if deleted:
            logger.info("Deleted user %s", user_id)
        return deleted

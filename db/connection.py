"""
db/connection.py
----------------
PostgreSQL implementation of the QueryExecutor contract.
Holds a single psycopg2 connection; every statement runs in its own
transaction and is committed or rolled back before the call returns.
"""

from typing import Any, TypeVar

import psycopg2
from psycopg2 import extras

from config import DATABASE_URL
from db.errors import PersistenceError
from db.executor import RowMapper
from utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


def to_pyformat(sql: str) -> str:
    """
    Rewrite ``?`` placeholders into psycopg2's ``%s`` style.

    Literal ``%`` characters are doubled so psycopg2 does not read them
    as placeholders. Every ``?`` is rewritten, so the SQL must not contain
    a ``?`` inside a quoted literal.
    """
    return sql.replace("%", "%%").replace("?", "%s")


class PsycopgExecutor:
    """QueryExecutor backed by one psycopg2 connection."""

    def __init__(self, conn):
        self._conn = conn

    @classmethod
    def connect(cls, dsn: str = DATABASE_URL) -> "PsycopgExecutor":
        """
        Open a connection whose cursors return rows keyed by column name.

        Args:
            dsn: libpq connection string or URL.

        Raises:
            PersistenceError: If the database is unreachable.
        """
        try:
            conn = psycopg2.connect(dsn, cursor_factory=extras.RealDictCursor)
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise PersistenceError(f"Failed to connect to database: {e}") from e
        logger.info("Database connection opened.")
        return cls(conn)

    def execute(self, sql: str, *params: Any) -> int:
        """Run a non-returning statement and return the affected row count."""
        conn = self._conn
        try:
            with conn.cursor() as cur:
                cur.execute(to_pyformat(sql), params)
                affected = cur.rowcount
            conn.commit()
            logger.debug(f"{sql} {params} -> {affected} row(s)")
            return affected
        except psycopg2.Error as e:
            self._rollback()
            logger.error(f"Statement failed: {sql} ({e})")
            raise PersistenceError(str(e)) from e

    def query(self, sql: str, mapper: RowMapper[T], *params: Any) -> list[T]:
        """Run a returning statement and map each row with ``mapper``."""
        conn = self._conn
        try:
            with conn.cursor() as cur:
                cur.execute(to_pyformat(sql), params)
                rows = cur.fetchall()
            conn.commit()
        except psycopg2.Error as e:
            self._rollback()
            logger.error(f"Query failed: {sql} ({e})")
            raise PersistenceError(str(e)) from e
        logger.debug(f"{sql} {params} -> {len(rows)} row(s)")
        return [mapper(row) for row in rows]

    def ping(self) -> None:
        """Check the connection is usable by running ``SELECT 1``."""
        self.execute("SELECT 1")

    def close(self) -> None:
        """Close the underlying connection."""
        if not self._conn.closed:
            self._conn.close()
            logger.info("Database connection closed.")

    def _rollback(self) -> None:
        """Roll back the failed statement; a broken connection only gets logged."""
        if self._conn.closed:
            return
        try:
            self._conn.rollback()
        except psycopg2.Error as e:
            logger.error(f"Rollback failed: {e}")

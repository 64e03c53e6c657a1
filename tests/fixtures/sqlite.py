"""
QueryExecutor backed by an in-memory SQLite database.

SQLite understands the same ``?`` placeholders and the same schema
statements as the PostgreSQL executor, so repository behaviour can be
checked against a real relational engine without a server.
"""

import sqlite3
from typing import Any

from db.errors import PersistenceError


class SqliteExecutor:
    """In-memory QueryExecutor with foreign-key enforcement switched on."""

    def __init__(self):
        self.conn = sqlite3.connect(":memory:")
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON")

    def execute(self, sql: str, *params: Any) -> int:
        try:
            with self.conn:
                cur = self.conn.execute(sql, params)
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e
        return cur.rowcount

    def query(self, sql: str, mapper, *params: Any) -> list:
        try:
            rows = self.conn.execute(sql, params).fetchall()
        except sqlite3.Error as e:
            raise PersistenceError(str(e)) from e
        return [mapper(dict(row)) for row in rows]

    def close(self) -> None:
        self.conn.close()

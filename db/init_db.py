"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.executor import QueryExecutor
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_STATEMENTS: tuple[str, ...] = (
    # Authors: id is assigned by the caller, never generated
    """
    CREATE TABLE IF NOT EXISTS authors (
        id      BIGINT PRIMARY KEY,
        name    TEXT,
        age     INTEGER
    )
    """,
    # Books: ISBN is the natural key; author_id must name an existing author
    """
    CREATE TABLE IF NOT EXISTS books (
        isbn        TEXT PRIMARY KEY,
        title       TEXT,
        author_id   BIGINT REFERENCES authors(id)
    )
    """,
)


def create_tables(executor: QueryExecutor) -> None:
    """
    Execute the schema statements to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).
    """
    for statement in SCHEMA_STATEMENTS:
        executor.execute(statement)
    logger.info("Database schema initialized successfully.")


if __name__ == "__main__":
    from db.connection import PsycopgExecutor

    executor = PsycopgExecutor.connect()
    try:
        create_tables(executor)
    finally:
        executor.close()
    print("✅ Database schema created successfully.")

"""
main.py
-------
Entry point for the library data-access layer.

Responsibilities:
    - Open the database connection and check it answers.
    - Make sure the authors and books tables exist.
    - Report how many records are stored.
"""

from db.connection import PsycopgExecutor
from db.init_db import create_tables
from repositories.author_repo import AuthorRepository
from repositories.book_repo import BookRepository
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Connect, bootstrap the schema and log a short summary."""

    # ── 1. Database setup ─────────────────────────────────
    logger.info("Connecting to database...")
    executor = PsycopgExecutor.connect()
    try:
        executor.ping()
        create_tables(executor)

        # ── 2. Summary ────────────────────────────────────
        authors = AuthorRepository(executor).find_many()
        books = BookRepository(executor).find_many()
        logger.info(f"{len(authors)} author(s) and {len(books)} book(s) on record.")
    finally:
        # ── 3. Cleanup ────────────────────────────────────
        executor.close()


if __name__ == "__main__":
    main()

"""
repositories/author_repo.py
---------------------------
Data access layer for authors.
All SQL queries related to the `authors` table live here.
"""

from typing import Any, Mapping

from db.executor import QueryExecutor, column
from models.author import Author
from utils.maybe import Maybe


class AuthorRepository:
    """Repository for CRUD operations on the authors table."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    # ── CREATE ────────────────────────────────────────────

    def create(self, author: Author) -> None:
        """
        Insert a new author record.

        Args:
            author: The Author to persist. Its `id` must not exist yet.

        Raises:
            PersistenceError: If the id is taken or the insert fails.
        """
        sql = "INSERT INTO authors (id, name, age) VALUES(?, ?, ?)"
        self.executor.execute(sql, author.id, author.name, author.age)

    # ── READ ──────────────────────────────────────────────

    def find_one(self, author_id: int) -> Maybe[Author]:
        """
        Fetch a single author by id.

        Returns:
            A present Maybe holding the Author, or an empty Maybe if no
            row matched.
        """
        sql = "SELECT * FROM authors WHERE id=? LIMIT 1"
        return Maybe.first(self.executor.query(sql, self.row_to_author, author_id))

    def find_many(self) -> list[Author]:
        """Fetch every author in the table's natural row order."""
        sql = "SELECT * FROM authors"
        return self.executor.query(sql, self.row_to_author)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, author: Author, author_id: int) -> None:
        """
        Overwrite the row whose id is `author_id` with the fields of `author`.

        The row's id is set to `author.id`, so passing a different id
        reassigns the key. No error is raised when nothing matches.

        Args:
            author: New field values.
            author_id: Id of the row to change.
        """
        sql = "UPDATE authors SET id = ?, name = ?, age = ? WHERE id = ?"
        self.executor.execute(sql, author.id, author.name, author.age, author_id)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def row_to_author(row: Mapping[str, Any]) -> Author:
        """Convert a named-column database row to an Author domain object."""
        return Author(
            id=column(row, "id", int),
            name=column(row, "name", str),
            age=column(row, "age", int),
        )

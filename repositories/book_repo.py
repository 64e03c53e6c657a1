"""
repositories/book_repo.py
-------------------------
Data access layer for books.
All SQL queries related to the `books` table live here.
"""

from typing import Any, Mapping

from db.executor import QueryExecutor, column
from models.book import Book
from utils.maybe import Maybe


class BookRepository:
    """Repository for CRUD operations on the books table, keyed by ISBN."""

    def __init__(self, executor: QueryExecutor):
        self.executor = executor

    # ── CREATE ────────────────────────────────────────────

    def create(self, book: Book) -> None:
        """
        Insert a new book record.

        Raises:
            PersistenceError: If the ISBN already exists or `author_id`
                does not name an existing author.
        """
        sql = "INSERT INTO Books (isbn, title, author_id) VALUES(?, ?, ?)"
        self.executor.execute(sql, book.isbn, book.title, book.author_id)

    # ── READ ──────────────────────────────────────────────

    def find_one(self, isbn: str) -> Maybe[Book]:
        """Fetch a single book by ISBN; empty Maybe if not found."""
        sql = "SELECT * FROM books WHERE isbn = ? LIMIT 1"
        return Maybe.first(self.executor.query(sql, self.row_to_book, isbn))

    def find_many(self) -> list[Book]:
        sql = "SELECT * FROM books"
        return self.executor.query(sql, self.row_to_book)

    # ── UPDATE ────────────────────────────────────────────

    def update(self, book: Book, isbn: str) -> None:
        """
        Overwrite the row whose ISBN is `isbn` with the fields of `book`.
        Like AuthorRepository.update, the key itself may change and a
        miss is silent.
        """
        sql = "UPDATE books SET isbn = ?, title = ?, author_id = ? WHERE isbn = ?"
        self.executor.execute(sql, book.isbn, book.title, book.author_id, isbn)

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def row_to_book(row: Mapping[str, Any]) -> Book:
        """Convert a named-column database row to a Book domain object."""
        return Book(
            isbn=column(row, "isbn", str),
            title=column(row, "title", str),
            author_id=column(row, "author_id", int),
        )

"""
models/book.py
--------------
Domain model for books.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """
    Represents a book record.

    Attributes:
        isbn: Natural primary key, assigned by the caller.
        title: Book title.
        author_id: Id of the owning author. The database enforces that it
            exists; this object does not check it.
    """
    isbn: str
    title: str
    author_id: int

    def __str__(self) -> str:
        return f"{self.isbn} | {self.title} | author #{self.author_id}"

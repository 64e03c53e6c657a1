"""
models/author.py
----------------
Domain model for book authors.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Author:
    """
    Represents an author record.

    Attributes:
        id: Caller-assigned primary key (64-bit integer).
        name: Display name.
        age: Age in years.
    """
    id: int
    name: str
    age: int

    def __str__(self) -> str:
        return f"#{self.id} {self.name} ({self.age})"

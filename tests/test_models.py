"""Tests for the Author and Book value objects."""

import dataclasses

import pytest

from models.author import Author
from models.book import Book


class TestAuthor:
    def test_equality_compares_all_fields(self):
        assert Author(id=1, name="Jason", age=32) == Author(id=1, name="Jason", age=32)
        assert Author(id=1, name="Jason", age=32) != Author(id=1, name="Jason", age=33)

    def test_fields_cannot_be_reassigned(self):
        author = Author(id=1, name="Jason", age=32)

        with pytest.raises(dataclasses.FrozenInstanceError):
            author.name = "Josh"

    def test_all_fields_are_required(self):
        with pytest.raises(TypeError):
            Author(id=1, name="Jason")

    def test_str(self):
        assert str(Author(id=1, name="Jason", age=32)) == "#1 Jason (32)"


class TestBook:
    def test_replace_builds_changed_copy(self):
        book = Book(isbn="SO432DFS", title="SomeOne", author_id=2)

        changed = dataclasses.replace(book, title="UPDATE")

        assert changed == Book(isbn="SO432DFS", title="UPDATE", author_id=2)
        assert book.title == "SomeOne"

    def test_str(self):
        book = Book(isbn="SO432DFS", title="SomeOne", author_id=2)

        assert str(book) == "SO432DFS | SomeOne | author #2"

"""Pytest fixtures shared by the repository tests."""

from unittest.mock import MagicMock

import pytest

from db.executor import QueryExecutor
from db.init_db import create_tables
from tests.fixtures.sqlite import SqliteExecutor


@pytest.fixture
def mock_executor():
    """Executor double that records calls; queries return no rows."""
    executor = MagicMock(spec=QueryExecutor)
    executor.execute.return_value = 1
    executor.query.return_value = []
    return executor


@pytest.fixture
def sqlite_executor():
    """Fresh in-memory database with the authors and books tables."""
    executor = SqliteExecutor()
    create_tables(executor)
    try:
        yield executor
    finally:
        executor.close()

"""
db/executor.py
--------------
The minimal contract repositories need from a database: run a statement,
or run a query and map each row. Implementations own the connection.

SQL handed to an executor always uses ``?`` positional placeholders,
bound in the order the parameters are given.
"""

from typing import Any, Callable, Mapping, Protocol, TypeVar

from db.errors import MappingError

T = TypeVar("T")

# Converts one named-column result row into one domain object.
RowMapper = Callable[[Mapping[str, Any]], T]


class QueryExecutor(Protocol):
    """Parameterized execute/query primitive supplied to every repository."""

    def execute(self, sql: str, *params: Any) -> int:
        """
        Run a non-returning statement (INSERT, UPDATE, DDL).

        Returns:
            Number of rows affected, as reported by the driver.

        Raises:
            PersistenceError: If the statement fails.
        """
        ...

    def query(self, sql: str, mapper: RowMapper[T], *params: Any) -> list[T]:
        """
        Run a returning statement and apply ``mapper`` to every row.

        Returns:
            Mapped objects in the order the database returned the rows.

        Raises:
            PersistenceError: If the statement fails.
            MappingError: If any row cannot be mapped.
        """
        ...


def column(row: Mapping[str, Any], name: str, kind: type) -> Any:
    """
    Read column ``name`` from ``row`` and check it is an instance of ``kind``.

    Raises:
        MappingError: If the column is missing, NULL, or of another type.
    """
    try:
        value = row[name]
    except KeyError:
        raise MappingError(f"Result row has no column '{name}'") from None
    # bool is an int subclass but never a valid integer column value
    if isinstance(value, bool) or not isinstance(value, kind):
        raise MappingError(
            f"Column '{name}' expected {kind.__name__}, got {type(value).__name__}"
        )
    return value

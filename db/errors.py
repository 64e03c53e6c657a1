"""
db/errors.py
------------
Error types raised by the data-access layer.
"""


class DataAccessError(Exception):
    """Base class for every error raised while reading or writing records."""


class PersistenceError(DataAccessError):
    """
    A statement could not be executed.

    Covers connectivity failures, constraint violations (duplicate key,
    missing foreign-key target) and malformed SQL. The driver exception is
    kept as ``__cause__``.
    """


class MappingError(DataAccessError):
    """A result row could not be converted into a domain object."""

"""Shared test fixtures: sample records and an in-memory SQLite executor."""

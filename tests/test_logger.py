"""Tests for the logging setup."""

import logging

from utils import logger as logger_module
from utils.logger import get_logger, resolve_level


class TestResolveLevel:
    def test_names_are_case_insensitive(self):
        assert resolve_level("debug") == logging.DEBUG
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_numeric_levels_pass_through(self):
        assert resolve_level("15") == 15

    def test_unknown_name_falls_back_to_info(self):
        assert resolve_level("LOUD") == logging.INFO


class TestGetLogger:
    def test_returns_named_logger(self):
        assert get_logger("db.connection").name == "db.connection"

    def test_root_handler_is_attached_once(self):
        get_logger("a")
        get_logger("b")

        handler = logger_module._handler
        assert handler is not None
        assert logging.getLogger().handlers.count(handler) == 1

"""Unit tests for per-category log level configuration."""

import logging

from user_directory.config import Settings
from user_directory.infrastructure.logging.log_config import level_from_name, setup_logging


def test_level_from_name_accepts_names_and_numbers():
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" WARNING ") == logging.WARNING
    assert level_from_name(logging.ERROR) == logging.ERROR
    assert level_from_name("chatty") == logging.INFO


def test_setup_logging_applies_category_levels():
    settings = Settings(
        log_level="INFO",
        log_level_http="ERROR",
        log_level_state="DEBUG",
    )

    applied = setup_logging(settings)

    assert applied["httpx"] == logging.ERROR
    assert logging.getLogger("httpcore").level == logging.ERROR
    assert logging.getLogger("UserRecordCache").level == logging.DEBUG
    assert applied["user_directory.application.state"] == logging.DEBUG
    assert logging.getLogger().level == logging.INFO

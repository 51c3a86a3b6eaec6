"""Shared fixtures for the stannum test suite."""

from __future__ import annotations

import logging

import pytest
import structlog

from stannum.config import get_settings
from stannum.logging import LIBRARY_LOGGER_NAME, LoggerRegistry
from stannum.messages import DefaultStrategy
from stannum.support.type_registry import list_types, unregister_type


@pytest.fixture
def strategy() -> DefaultStrategy:
    return DefaultStrategy()


@pytest.fixture(autouse=True)
def _clean_type_registry():
    before = set(list_types())
    yield
    for name in set(list_types()) - before:
        unregister_type(name)


@pytest.fixture
def fresh_settings():
    get_settings.cache_clear()
    yield get_settings
    get_settings.cache_clear()


@pytest.fixture
def restore_logging():
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    handlers, level, propagate = list(library_logger.handlers), library_logger.level, library_logger.propagate
    yield library_logger
    library_logger.handlers = handlers
    library_logger.setLevel(level)
    library_logger.propagate = propagate
    structlog.reset_defaults()
    LoggerRegistry._loggers.clear()

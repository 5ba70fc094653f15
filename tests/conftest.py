"""Pytest configuration and fixtures."""

import logging

import pytest

from shouldcheck.config import get_config


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Reset shouldcheck loggers after each test so handlers don't leak."""
    yield

    for name in list(logging.Logger.manager.loggerDict.keys()):
        if not name.startswith("shouldcheck"):
            continue
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
        logger.disabled = False


@pytest.fixture(autouse=True)
def fresh_config(monkeypatch):
    """Start every test from default settings."""
    monkeypatch.delenv("SHOULDCHECK_CONFIG", raising=False)
    get_config.cache_clear()
    yield
    get_config.cache_clear()

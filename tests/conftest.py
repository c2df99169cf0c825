"""Shared pytest fixtures for all tests."""

from datetime import UTC, datetime

import pytest

from colmodel.analysis.typing.hints import get_hint_config
from colmodel.core.config import get_settings
from colmodel.core.logging import configure_logging


@pytest.fixture(autouse=True)
def fresh_settings():
    """Rebuild cached settings and name hints for every test.

    Tests may change COLMODEL_* environment variables with monkeypatch, and
    CLI commands reconfigure the log level.
    """
    get_settings.cache_clear()
    get_hint_config.cache_clear()
    configure_logging(log_level="INFO", log_format="console")
    yield
    get_settings.cache_clear()
    get_hint_config.cache_clear()


@pytest.fixture
def utc():
    """Build a UTC datetime: utc(2015, 1, 1, 10, 30)."""

    def _utc(*args: int) -> datetime:
        return datetime(*args, tzinfo=UTC)

    return _utc

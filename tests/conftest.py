"""Pytest configuration and fixtures for ddd-commons tests."""

import pytest
from unittest.mock import MagicMock

from ddd_commons.application import AbstractQuery, ApplicationServiceContext
from ddd_commons.config import get_settings
from ddd_commons.core.dto import get_catalog_registry


@pytest.fixture(autouse=True)
def reset_library_state(monkeypatch):
    """Isolate cached settings, catalogs and query limits between tests."""
    for name in (
        "DDD_COMMONS_DEFAULT_PAGE_SIZE",
        "DDD_COMMONS_PAGE_MAX_SIZE",
        "DDD_COMMONS_SERIALIZER_COMPRESSION",
        "DDD_COMMONS_JSON_ENSURE_ASCII",
    ):
        monkeypatch.delenv(name, raising=False)

    get_settings.cache_clear()
    get_catalog_registry().clear()
    AbstractQuery._page_max_size = None
    yield
    get_settings.cache_clear()
    get_catalog_registry().clear()
    AbstractQuery._page_max_size = None


@pytest.fixture
def mock_async_runner():
    """Mock async runner for testing."""
    runner = MagicMock()
    runner.run = MagicMock(return_value=None)
    return runner


@pytest.fixture
def mock_unit_of_work():
    """Mock unit of work that executes callbacks inline."""
    uow = MagicMock()
    uow.execute = MagicMock(side_effect=lambda callback: callback())
    return uow


@pytest.fixture
def mock_event_publisher():
    """Mock domain event publisher for testing."""
    publisher = MagicMock()
    publisher.publish = MagicMock(return_value=None)
    return publisher


@pytest.fixture
def service_context(mock_async_runner, mock_unit_of_work, mock_event_publisher):
    """Application service context wired with mocks."""
    return ApplicationServiceContext(
        async_runner=mock_async_runner,
        unit_of_work=mock_unit_of_work,
        event_publisher=mock_event_publisher,
    )


@pytest.fixture
def sample_translations():
    """Sample translation catalog for testing."""
    return {
        "en": {
            "users": {
                "greeting": "Hello, :name!",
                "full_greeting": "Hello, :name_full (:name)!",
                "rules": ["Be kind, :name.", "Be brief."],
            },
            "common": {"yes": "Yes", "no": "No"},
        },
        "de": {
            "users": {"greeting": "Hallo, :name!"},
        },
    }

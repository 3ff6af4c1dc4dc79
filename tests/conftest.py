"""Shared pytest fixtures for the test suite."""

import logging
from collections.abc import Iterator
from datetime import UTC, datetime

import pytest
import structlog

from restaurant_core.config import get_settings
from restaurant_core.infrastructure import FixedTimeProvider, InMemoryOrderRepository


@pytest.fixture
def fixed_time() -> datetime:
    """A fixed timestamp for deterministic order-id generation."""
    return datetime(2024, 1, 15, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def time_provider(fixed_time: datetime) -> FixedTimeProvider:
    """A time provider pinned to fixed_time."""
    return FixedTimeProvider(fixed_time)


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    """A fresh, isolated order repository."""
    return InMemoryOrderRepository()


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo configure_logging() and cached settings between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()

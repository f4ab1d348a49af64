"""Pytest configuration and fixtures for unit tests."""

import pytest

from ventureboard.core.config import Settings
from ventureboard.domain.business import BusinessPriority
from ventureboard.modules.checklist.engine import ChecklistEngine
from ventureboard.modules.checklist.facade import ChecklistFacade
from tests.unit.mocks import FrozenClock, InMemoryStore


@pytest.fixture
def store():
    """Provides a fresh, empty InMemoryStore for each test."""
    return InMemoryStore()


@pytest.fixture
def clock():
    """Provides a FrozenClock at a fixed UTC instant."""
    return FrozenClock()


@pytest.fixture
def engine(store, clock):
    """Engine over an empty store."""
    return ChecklistEngine(store, clock=clock)


@pytest.fixture
def acme(engine):
    """Primary business seeded with the template catalog."""
    return engine.add_business({"name": "Acme Labs", "priority": BusinessPriority.PRIMARY})


@pytest.fixture
def test_settings():
    """Settings used for facade bootstrap."""
    return Settings(
        _env_file=None,
        operator_id="tester",
        default_business_name="Startempire Wire",
        checklist_path="unused.json",
    )


@pytest.fixture
def facade(engine, test_settings):
    """Facade over the engine fixture; bootstraps on first command."""
    return ChecklistFacade(engine, config=test_settings)

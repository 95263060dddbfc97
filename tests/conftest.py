"""
Test configuration and fixtures for the shortly service.
This centralizes all test setup, making individual tests clean.
"""

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from main import app
from shortly.dependencies import get_link_store
from shortly.models.link import LinkRecord
from shortly.services.identifier_strategies import HashidsIdentifierStrategy
from shortly.services.resolution_service import ResolutionService
from shortly.services.shortening_service import ShorteningService
from shortly.storage.strategies import InMemoryLinkStore

FIXED_INSTANT = datetime(2019, 2, 24, 11, 24, 1, tzinfo=timezone.utc)


@pytest.fixture
def fixed_instant():
    """The instant every generated id in the tests is created at"""
    return FIXED_INSTANT


@pytest.fixture(scope="function")
def link_store():
    """
    Create a fresh, empty store for each test.
    This ensures tests are isolated and don't affect each other.
    """
    return InMemoryLinkStore()


@pytest.fixture(scope="function")
def seeded_store(link_store):
    """Store holding one known record at id 123456"""
    link_store.set("123456", LinkRecord(
        id="123456",
        original_url="http://google.com",
        short_url="http://short.ly/123456",
    ))
    return link_store


@pytest.fixture
def generator():
    return HashidsIdentifierStrategy()


@pytest.fixture
def shortening_service(seeded_store, generator):
    return ShorteningService(
        store=seeded_store,
        generator=generator,
        clock=lambda: FIXED_INSTANT
    )


@pytest.fixture
def resolution_service(seeded_store):
    return ResolutionService(store=seeded_store)


@pytest.fixture(scope="function")
def client(seeded_store):
    """
    Create a test client with the link store dependency overridden.
    This is the main fixture that API tests will use.
    """
    app.dependency_overrides[get_link_store] = lambda: seeded_store
    
    with TestClient(app) as test_client:
        yield test_client
    
    # Clean up overrides
    app.dependency_overrides.clear()

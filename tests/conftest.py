"""
Global pytest fixtures for the short URL test suite.

Responsibilities:
    - Provide a fresh FastAPI TestClient via the app factory for integration tests
    - Provide isolated in-memory Storage and AliasStore fixtures for direct testing

Using `create_app()` per test gives every test its own AliasStore, so alias
numbering always starts at 1 and no state leaks between tests.
"""

import pytest
from fastapi.testclient import TestClient

from main import create_app
from shorturl_platform.manager.alias_store import AliasStore
from shorturl_platform.manager.strategies import SequentialStrategy
from shorturl_platform.storage.storage import Storage


@pytest.fixture
def storage() -> Storage:
    """Provide a fresh in-memory Storage backend."""
    return Storage()


@pytest.fixture
def store(storage: Storage) -> AliasStore:
    """
    Provide an AliasStore wired to the storage fixture.

    The strategy is passed explicitly so tests can swap in other starts.
    """
    return AliasStore(storage=storage, strategy=SequentialStrategy(start=1))


@pytest.fixture
def client(store: AliasStore) -> TestClient:
    """
    Provide a fresh TestClient with a new app instance.

    The app shares the `store` fixture so tests can inspect state directly.
    """
    app = create_app(store=store)
    return TestClient(app)

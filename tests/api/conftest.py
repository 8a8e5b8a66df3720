"""Fixtures for HTTP API tests."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker

from catalog_api import main
from catalog_api.api.products import get_product_store
from catalog_api.catalog.memory import InMemoryProductStore, reset_memory_store
from catalog_api.infrastructure import database
from catalog_api.infrastructure.config import settings
from catalog_api.main import app


@pytest.fixture
def api_store(memory_store: InMemoryProductStore) -> InMemoryProductStore:
    """Store behind the API, seeded with the sample products."""
    return memory_store


@pytest.fixture
def client(api_store: InMemoryProductStore) -> Generator[TestClient, None, None]:
    """Test client whose requests all use api_store."""
    reset_memory_store()
    app.dependency_overrides[get_product_store] = lambda: api_store
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_memory_store()


@pytest.fixture
def db_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """Test client on the database backend over an empty in-memory SQLite.

    Nothing is overridden: requests go through get_product_store and
    session_scope exactly as in production, and the app lifespan creates
    the table and disposes the engine.
    """
    test_engine = database.build_engine("sqlite+aiosqlite:///:memory:")
    monkeypatch.setattr(settings, "store_backend", "database")
    monkeypatch.setattr(database, "engine", test_engine)
    monkeypatch.setattr(
        database,
        "async_session_factory",
        async_sessionmaker(test_engine, expire_on_commit=False),
    )
    monkeypatch.setattr(main, "engine", test_engine)
    app.dependency_overrides.clear()

    with TestClient(app) as client:
        yield client

"""
Shared fixtures.

Every test gets its own storage, session store and app instance so no
session leaks between test cases.
"""
import pytest
from fastapi.testclient import TestClient

from shopdesk.app import create_app
from shopdesk.config import MemoryStorage, Settings
from shopdesk.session import SessionStore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        storage_backend="memory",
        secret_key="test-secret",
        demo_logins_enabled=True,
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def store(storage) -> SessionStore:
    return SessionStore(storage)


@pytest.fixture
def app(test_settings, storage):
    return create_app(test_settings, storage)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)

"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with backend-specific helpers
for testing the profile store, the application context and the routers.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from pymongo.errors import PyMongoError

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))

from profiles_app.session import SessionHolder  # noqa: E402


# =============================================================================
# Profile Service Fixtures
# =============================================================================

@pytest.fixture
def session() -> SessionHolder:
    return SessionHolder()


@pytest_asyncio.fixture
async def profile_service(mock_profiles_db, session):
    """ProfileService over the indexed mock database."""
    from profiles_app.services.profile_service import ProfileService

    return ProfileService(mock_profiles_db, session)


@pytest.fixture
def failing_collection():
    """
    A profiles collection where every operation raises PyMongoError.
    """
    error = PyMongoError("connection reset")
    collection = MagicMock()
    collection.find_one = AsyncMock(side_effect=error)
    collection.count_documents = AsyncMock(side_effect=error)
    collection.insert_one = AsyncMock(side_effect=error)
    collection.update_one = AsyncMock(side_effect=error)
    collection.delete_one = AsyncMock(side_effect=error)
    collection.find = MagicMock(side_effect=error)
    return collection


@pytest.fixture
def failing_service(failing_collection, session):
    """ProfileService whose database fails on every call."""
    from profiles_app.services.profile_service import ProfileService

    db = MagicMock()
    db.__getitem__.return_value = failing_collection
    return ProfileService(db, session)


# =============================================================================
# API Fixtures
# =============================================================================

@pytest.fixture
def sync_mongo_client():
    """
    mongomock-motor client created outside any event loop, for TestClient use.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
    except ImportError:
        pytest.skip("mongomock-motor not installed")
    return AsyncMongoMockClient()


@pytest.fixture
def api_context(test_settings, sync_mongo_client):
    """AppContext whose pool hands out the mock client."""
    from profiles_app.context import AppContext
    from profiles_app.database.connections import ConnectionPool

    pool = ConnectionPool(
        test_settings,
        client_factory=lambda *args, **kwargs: sync_mongo_client,
    )
    return AppContext(test_settings, pool=pool)


@pytest.fixture
def client(api_context):
    """
    TestClient for an app serving `api_context`.
    """
    from fastapi.testclient import TestClient
    from profiles_app.main import create_app

    with TestClient(create_app(api_context)) as c:
        yield c


@pytest.fixture
def registration_payload() -> dict:
    """Registration request body for a new user."""
    return {
        "email": "alice@example.com",
        "username": "alice",
        "password": "Secret123!",
        "password_confirm": "Secret123!",
        "name": "Alice",
        "lastname": "Liddell",
        "telephone": "600111222",
        "gender": "FEMALE",
        "card": "4000-1234-5678-9010",
    }


@pytest.fixture
def registered_user(client, registration_payload) -> dict:
    """Register the default user through the API and return the response body."""
    response = client.post("/auth/register", json=registration_payload)
    assert response.status_code == 201
    return response.json()


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert

"""
Global test fixtures for Profiles App.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock / mongomock-motor)
- Test settings pointing at a throwaway database
- User and admin factories
"""

import sys
from pathlib import Path
from typing import Callable

import pytest
import pytest_asyncio

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

from profiles_app.config import Settings  # noqa: E402
from profiles_app.core.security import hash_password  # noqa: E402
from profiles_app.models.profile import Admin, Gender, User  # noqa: E402


TEST_DB_NAME = "profiles_test"


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def test_settings() -> Settings:
    """Settings for an isolated test database."""
    return Settings(
        mongo_uri="mongodb://test:27017",
        mongo_db_name=TEST_DB_NAME,
        mongo_max_pool_size=5,
        mongo_min_pool_size=1,
        mongo_max_wait_ms=1000,
        log_level="DEBUG",
    )


# =============================================================================
# MongoDB Fixtures (mongomock)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    try:
        from mongomock_motor import AsyncMongoMockClient
        client = AsyncMongoMockClient()
        yield client
        client.close()
    except ImportError:
        pytest.skip("mongomock-motor not installed")


@pytest_asyncio.fixture
async def mock_profiles_db(mock_async_mongo_client):
    """Provide mock profiles database with the app's indexes."""
    from profiles_app.database.registry import create_indexes

    db = mock_async_mongo_client[TEST_DB_NAME]
    await create_indexes(db)
    yield db


# =============================================================================
# Profile Fixtures
# =============================================================================

@pytest.fixture
def make_user() -> Callable[..., User]:
    """
    Factory for unsaved users with a plain text password.

    Usage:
        user = make_user(username="bob", email="bob@example.com")
    """
    def _make(**overrides) -> User:
        data = {
            "email": "alice@example.com",
            "username": "alice",
            "password": "Secret123!",
            "name": "Alice",
            "lastname": "Liddell",
            "telephone": "600111222",
            "gender": Gender.FEMALE,
            "card": "4000-1234-5678-9010",
        }
        data.update(overrides)
        return User(**data)

    return _make


@pytest.fixture
def admin_password() -> str:
    return "AdminPassword123!"


@pytest.fixture
def admin_document(admin_password) -> dict:
    """An Admin document as stored in MongoDB (without _id)."""
    return {
        "type": "Admin",
        "email": "admin@example.com",
        "username": "root",
        "password": hash_password(admin_password),
        "name": "Ada",
        "lastname": "Admin",
        "telephone": "600999000",
        "currentAccount": "ES00-0000-0000",
    }


@pytest.fixture
def admin_profile() -> Admin:
    """An Admin model as it would come back from login."""
    return Admin(
        id="507f1f77bcf86cd799439011",
        email="admin@example.com",
        username="root",
        password="$2b$12$notarealhashnotarealhashnotarealhashnotarealhas",
        name="Ada",
        lastname="Admin",
        telephone="600999000",
        current_account="ES00-0000-0000",
    )

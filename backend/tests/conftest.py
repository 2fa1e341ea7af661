"""
Roster Backend — Test Configuration (conftest.py)
==================================================

What:  Shared pytest fixtures for the entire test suite.

Function-scoped fixtures (created fresh for each test):
    ├── user_service:       Store seeded with the three demo users
    ├── empty_user_service: Store with no records
    └── test_client:        HTTPX AsyncClient bound to an app that owns
                            the `user_service` fixture
"""

import os

# Set before roster.config is imported anywhere
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SEED_USERS"] = "true"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from roster.main import create_app
from roster.services.user_service import UserService


@pytest.fixture
def user_service():
    """A fresh store holding Tyler (1), John (2) and Stan (3)."""
    return UserService()


@pytest.fixture
def empty_user_service():
    """A fresh store with no records."""
    return UserService(seed=[])


@pytest.fixture
def app(user_service):
    """Application instance serving the `user_service` fixture."""
    return create_app(user_service=user_service)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP client talking to the app in-process.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/users")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

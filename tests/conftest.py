# 📄 File: tests/conftest.py
# 🧭 Purpose (Layman Explanation):
# Shared setup for the tests: a throwaway in-memory database, ready-made services and a
# test web client.
# 🧪 Purpose (Technical Summary):
# Pins test environment variables before devconnect settings load, then provides store,
# repository, service, user factory and TestClient fixtures.
# 🔗 Dependencies:
# pytest, pytest-asyncio, FastAPI TestClient (httpx), tests.fakes
# 🔄 Connected Modules / Calls From:
# Every test module

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-devconnect")
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_FORMAT"] = "text"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
from fastapi.testclient import TestClient

from devconnect.modules.community.domain.services.post_service import PostService
from devconnect.modules.community.infrastructure.database.post_repository_impl import PostRepositoryImpl
from devconnect.modules.user_management.domain.models.user import User
from devconnect.modules.user_management.domain.services.account_service import AccountService
from devconnect.modules.user_management.domain.services.auth_service import AuthService
from devconnect.modules.user_management.domain.services.profile_service import ProfileService
from devconnect.modules.user_management.infrastructure.database.profile_repository_impl import ProfileRepositoryImpl
from devconnect.modules.user_management.infrastructure.database.user_repository_impl import UserRepositoryImpl
from devconnect.shared.config.settings import get_settings
from devconnect.shared.core.security import SecurityManager

from tests.fakes import InMemoryDocumentStore


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture
def store():
    return InMemoryDocumentStore()


@pytest.fixture
def security(settings):
    return SecurityManager(settings)


# =========================================================================
# REPOSITORIES AND SERVICES
# =========================================================================

@pytest.fixture
def user_repository(store):
    return UserRepositoryImpl(store)


@pytest.fixture
def profile_repository(store):
    return ProfileRepositoryImpl(store)


@pytest.fixture
def post_repository(store):
    return PostRepositoryImpl(store)


@pytest.fixture
def auth_service(user_repository, security, settings):
    return AuthService(user_repository, security.credentials, security.tokens, settings)


@pytest.fixture
def profile_service(profile_repository, user_repository):
    return ProfileService(profile_repository, user_repository)


@pytest.fixture
def account_service(user_repository, profile_repository, post_repository):
    return AccountService(user_repository, profile_repository, post_repository)


@pytest.fixture
def post_service(post_repository, user_repository):
    return PostService(post_repository, user_repository)


@pytest.fixture
def make_user(user_repository):
    """Factory creating a stored user without going through bcrypt."""

    async def _make(name: str = "Alice", email: str = None) -> User:
        user = User(
            name=name,
            email=email or f"{name.lower()}@example.com",
            password_hash="not-a-real-hash",
            avatar=User.gravatar_url(email or f"{name.lower()}@example.com"),
        )
        return await user_repository.create(user)

    return _make


# =========================================================================
# API
# =========================================================================

@pytest.fixture
def client(settings, store):
    from devconnect.main import create_application

    app = create_application(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register(client):
    """Register through the API and return auth headers plus the user id."""

    def _register(name: str = "Alice", email: str = None, password: str = "secret1"):
        response = client.post(
            "/api/v1/users",
            json={"name": name, "email": email or f"{name.lower()}@example.com", "password": password},
        )
        assert response.status_code == 201, response.text
        headers = {"Authorization": f"Bearer {response.json()['access_token']}"}
        user_id = client.get("/api/v1/auth", headers=headers).json()["id"]
        return headers, user_id

    return _register

"""Pytest fixtures for API and persistence integration tests.

The relational store is a throwaway SQLite file per test (schema created
with a synchronous engine). Redis is replaced by the in-memory double.
"""

from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from pydantic import SecretStr
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from threadit.infrastructure.email import EmailService
from threadit.infrastructure.persistence.sqlalchemy.models import Base
from threadit.presentation.api.app import API_V1_PREFIX, create_app
from threadit.presentation.api.config import get_api_settings
from threadit.presentation.api.dependencies import (
    get_db_session,
    get_email_service,
    get_password_service,
    get_redis,
)
from threadit_config.settings import Settings


@pytest.fixture
def api_v1_prefix() -> str:
    """Get the API v1 prefix for building URLs."""
    return API_V1_PREFIX


@pytest.fixture
def api_settings() -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        session_secret=SecretStr("test-session-secret-for-testing-only"),
        postgres_password=SecretStr("test-password"),
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        session_cookie_secure=False,  # Allow HTTP in tests
        frontend_base_url="http://localhost:3000",
        _env_file=None,
    )


@pytest.fixture
def test_db_engine(tmp_path):
    """SQLite file database with the full schema."""
    db_path = tmp_path / "threadit-test.db"

    sync_engine = create_engine(f"sqlite:///{db_path}")
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    # NullPool: every session opens its own connection on its own event loop
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)
    yield engine
    engine.sync_engine.dispose()


@pytest.fixture
def session_maker(test_db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def email_service() -> Mock:
    return Mock(spec=EmailService)


@pytest.fixture
def test_app(api_settings, session_maker, fake_redis, password_service, email_service):
    """Application with database, Redis, hashing and email overridden."""
    app = create_app(settings=api_settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_api_settings] = lambda: api_settings
    app.dependency_overrides[get_redis] = lambda: fake_redis
    app.dependency_overrides[get_password_service] = lambda: password_service
    app.dependency_overrides[get_email_service] = lambda: email_service
    return app


@pytest.fixture
def test_client(test_app) -> TestClient:
    """Test client. The lifespan is not entered, so no real database is needed."""
    return TestClient(test_app)


@pytest.fixture
def registered_user_data() -> dict:
    return {
        "username": "alice",
        "email": "alice@example.com",
        "password": "secret123",
    }

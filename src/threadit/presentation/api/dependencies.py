"""FastAPI dependency injection for the Threadit API.

Provides dependencies for:
- Database sessions
- Redis client and the stores built on it
- The client's HTTP session (from the signed cookie)
- Service instances
"""

import logging
from functools import lru_cache
from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from redis.asyncio import Redis
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from threadit.application.services import AuthenticationService
from threadit.domain.post import PostRepository
from threadit.infrastructure.email import EmailService
from threadit.infrastructure.persistence.sqlalchemy.init_db import create_engine
from threadit.infrastructure.persistence.sqlalchemy.repositories import (
    PostRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)
from threadit.presentation.api.config import get_api_settings
from threadit.presentation.api.session_cookie import SessionCookie
from threadit_auth import (
    HttpSession,
    PasswordHashingService,
    ResetTokenStore,
    SessionManager,
    SessionStoreError,
)
from threadit_auth.persistence.redis import (
    RedisResetTokenStore,
    RedisSessionStore,
    create_redis_client,
)
from threadit_config.settings import Settings

logger = logging.getLogger(__name__)

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


# -----------------------------------------------------------------------------
# Database Engine & Session (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Get the shared async database engine (singleton).

    The engine manages the connection pool and is reused across all requests.

    Returns
    -------
    AsyncEngine instance
    """
    return create_engine(get_api_settings().database_url)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Routers commit explicitly; anything uncommitted is rolled back when
    the session closes.

    Yields
    ------
    AsyncSession for database operations
    """
    async with get_session_maker()() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Redis (Singleton)
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_redis() -> Redis:
    """Get the shared Redis client (singleton, pooled)."""
    return create_redis_client(get_api_settings().redis_url)


RedisDep = Annotated[Redis, Depends(get_redis)]


# -----------------------------------------------------------------------------
# Sessions
# -----------------------------------------------------------------------------


def get_session_cookie(settings: SettingsDep) -> SessionCookie:
    return SessionCookie(settings.session_secret.get_secret_value())


def get_session_manager(redis: RedisDep, settings: SettingsDep) -> SessionManager:
    store = RedisSessionStore(redis, prefix=settings.session_key_prefix)
    return SessionManager(store, max_age_seconds=settings.session_max_age_seconds)


SessionCookieDep = Annotated[SessionCookie, Depends(get_session_cookie)]
SessionManagerDep = Annotated[SessionManager, Depends(get_session_manager)]


async def get_http_session(
    request: Request,
    manager: SessionManagerDep,
    cookie: SessionCookieDep,
    settings: SettingsDep,
) -> HttpSession:
    """
    Load the client's session from the signed session cookie.

    A missing, forged or expired cookie yields a fresh anonymous session.
    """
    session_id = cookie.loads(request.cookies.get(settings.session_cookie_name))
    return await manager.load(session_id)


ClientSession = Annotated[HttpSession, Depends(get_http_session)]


async def get_logout_session(
    request: Request,
    manager: SessionManagerDep,
    cookie: SessionCookieDep,
    settings: SettingsDep,
) -> Optional[HttpSession]:
    """
    Load the session to end, or None when the session store is unreachable.

    Logout reports an unreachable store as a failed destroy instead of
    an internal error.
    """
    try:
        return await get_http_session(request, manager, cookie, settings)
    except SessionStoreError as e:
        logger.error("Session store unavailable during logout: %s", e)
        return None


LogoutSession = Annotated[Optional[HttpSession], Depends(get_logout_session)]


# -----------------------------------------------------------------------------
# Services
# -----------------------------------------------------------------------------


@lru_cache(maxsize=1)
def get_password_service() -> PasswordHashingService:
    """Get password hashing service."""
    return PasswordHashingService()


def get_token_store(redis: RedisDep, settings: SettingsDep) -> ResetTokenStore:
    return RedisResetTokenStore(redis, prefix=settings.reset_token_prefix)


def get_email_service(settings: SettingsDep) -> EmailService:
    return EmailService(settings)


async def get_authentication_service(  # noqa: PLR0913
    session: DBSession,
    settings: SettingsDep,
    session_manager: SessionManagerDep,
    token_store: ResetTokenStore = Depends(get_token_store),
    password_service: PasswordHashingService = Depends(get_password_service),
    email_service: EmailService = Depends(get_email_service),
) -> AuthenticationService:
    """
    Get authentication service with all dependencies.

    This service orchestrates registration, login, sessions and password
    recovery.
    """
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        token_store=token_store,
        session_manager=session_manager,
        password_service=password_service,
        email_service=email_service,
        frontend_base_url=settings.frontend_base_url,
        reset_token_ttl_seconds=settings.reset_token_ttl_seconds,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


def get_post_repository(session: DBSession) -> PostRepository:
    return PostRepositorySQLAlchemy(session)


PostRepo = Annotated[PostRepository, Depends(get_post_repository)]

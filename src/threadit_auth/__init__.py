"""Threadit Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the Threadit application domain. It handles:
- Password hashing (argon2id)
- Password reset tokens kept in a key-value store
- Server-side sessions addressed by an opaque session id

Architecture:
    threadit_auth/
    ├── services/           # Pure logic (password hashing, session binding)
    ├── repositories/       # Abstract store interfaces
    ├── persistence/        # Implementations by technology
    │   └── redis/          # Redis implementation
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from threadit_auth import PasswordHashingService, SessionManager

    from threadit_auth.persistence.redis import (
        RedisResetTokenStore,
        RedisSessionStore,
        create_redis_client,
    )
"""

from threadit_auth.exceptions import (
    AuthError,
    SessionStoreError,
    WeakPasswordError,
)
from threadit_auth.repositories import ResetTokenStore, SessionStore
from threadit_auth.schemas import HttpSession
from threadit_auth.services import PasswordHashingService, SessionManager

__all__ = [
    # Services
    "PasswordHashingService",
    "SessionManager",
    # Repositories (interfaces)
    "ResetTokenStore",
    "SessionStore",
    # Schemas
    "HttpSession",
    # Exceptions
    "AuthError",
    "SessionStoreError",
    "WeakPasswordError",
]

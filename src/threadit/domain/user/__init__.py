"""User domain manages account identity.

This domain handles:
- User aggregate (id, username, email, password hash)
- Unique username/email guarantees (enforced by the store)

Design notes:
- User ID is an integer assigned by the relational store on insert
- The password hash travels with the aggregate but is never serialized
  to API clients
- Repository interface defined here, implementation in infrastructure
"""

from threadit.domain.user.aggregates import User
from threadit.domain.user.exceptions import (
    UniqueConstraintViolationError,
)
from threadit.domain.user.repositories import UserRepository

__all__ = [
    "UniqueConstraintViolationError",
    "User",
    "UserRepository",
]

"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadit.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by their username."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email address."""

    async def find_by_username_or_email(self, value: str) -> Optional[User]:
        """Find a user by email if ``value`` contains "@", else by username.

        This is a dispatch heuristic, not email validation.
        """
        if "@" in value:
            return await self.find_by_email(value)
        return await self.find_by_username(value)

    @abstractmethod
    async def insert(self, username: str, email: str, password_hash: str) -> User:
        """Insert a new user and return it with its assigned ID.

        Raises
        ------
        UniqueConstraintViolationError
            If the username or email is already taken
        """

    @abstractmethod
    async def update(self, user: User) -> None:
        """Persist changes of an existing user in place."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""

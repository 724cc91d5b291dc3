"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from threadit.domain.shared.time import ensure_tz_aware
from threadit.domain.user import UniqueConstraintViolationError, User, UserRepository
from threadit.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION_SQLSTATE = "23505"


def _is_unique_violation(error: IntegrityError) -> bool:
    sqlstate = getattr(error.orig, "sqlstate", None) or getattr(
        error.orig, "pgcode", None
    )
    if sqlstate == UNIQUE_VIOLATION_SQLSTATE:
        return True
    message = str(error.orig).lower()
    # PostgreSQL: "duplicate key value violates unique constraint"
    # SQLite: "UNIQUE constraint failed: users.username"
    return "unique" in message


def _violated_field(error: IntegrityError) -> Optional[str]:
    message = str(error.orig).lower()
    for field in ("username", "email"):
        if field in message:
            return field
    return None


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: int) -> Optional[User]:
        model = await self._find_model_by_id(user_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def find_by_username(self, username: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.username == username)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def insert(self, username: str, email: str, password_hash: str) -> User:
        model = UserModel(
            username=username,
            email=email,
            password_hash=password_hash,
        )
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if _is_unique_violation(e):
                raise UniqueConstraintViolationError(_violated_field(e)) from e
            raise

        logger.info("Created user: %s (username: %s)", model.id, model.username)
        return self._map_to_domain(model)

    async def update(self, user: User) -> None:
        model = await self._find_model_by_id(user.id)
        if model is None:
            logger.warning("Update skipped, user not found: %s", user.id)
            return

        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
        await self._session.flush()
        logger.debug("Updated user: %s", user.id)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(UserModel)
        result = await self._session.execute(stmt)
        return result.scalar_one()

    async def _find_model_by_id(self, user_id: int) -> Optional[UserModel]:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            username=model.username,
            email=model.email,
            password_hash=model.password_hash,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

"""Integration tests for UserRepositorySQLAlchemy against SQLite."""

from datetime import timedelta

import pytest

from threadit.domain.user import UniqueConstraintViolationError
from threadit.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
def repo(db_session) -> UserRepositorySQLAlchemy:
    return UserRepositorySQLAlchemy(db_session)


class TestUserRepository:
    async def test_insert_assigns_id(self, repo):
        user = await repo.insert("alice", "alice@example.com", "hash")

        assert user.id is not None
        assert user.username == "alice"
        assert await repo.count() == 1

    async def test_find_by_each_key(self, repo):
        user = await repo.insert("alice", "alice@example.com", "hash")

        assert (await repo.find_by_id(user.id)).username == "alice"
        assert (await repo.find_by_username("alice")).id == user.id
        assert (await repo.find_by_email("alice@example.com")).id == user.id
        assert await repo.find_by_username("bob") is None
        assert await repo.find_by_id(999) is None

    async def test_username_or_email_dispatches_on_at_sign(self, repo):
        user = await repo.insert("alice", "alice@example.com", "hash")

        assert (await repo.find_by_username_or_email("alice")).id == user.id
        assert (await repo.find_by_username_or_email("alice@example.com")).id == user.id
        # Contains "@", so it is only ever looked up as an email
        assert await repo.find_by_username_or_email("alice@") is None

    async def test_duplicate_username_raises(self, repo):
        await repo.insert("alice", "alice@example.com", "hash")

        with pytest.raises(UniqueConstraintViolationError) as exc_info:
            await repo.insert("alice", "other@example.com", "hash")

        assert exc_info.value.field == "username"

    async def test_duplicate_email_raises(self, repo):
        await repo.insert("alice", "alice@example.com", "hash")

        with pytest.raises(UniqueConstraintViolationError) as exc_info:
            await repo.insert("bob", "alice@example.com", "hash")

        assert exc_info.value.field == "email"

    async def test_update_persists_password_hash(self, repo, db_session, session_maker):
        user = await repo.insert("alice", "alice@example.com", "old_hash")
        user.change_password_hash("new_hash")

        await repo.update(user)
        await db_session.commit()

        async with session_maker() as fresh:
            reloaded = await UserRepositorySQLAlchemy(fresh).find_by_id(user.id)
        assert reloaded.password_hash == "new_hash"

    async def test_reloaded_timestamps_are_utc(self, repo, db_session, session_maker):
        user = await repo.insert("alice", "alice@example.com", "hash")
        await db_session.commit()

        async with session_maker() as fresh:
            reloaded = await UserRepositorySQLAlchemy(fresh).find_by_id(user.id)

        assert reloaded.created_at.utcoffset() == timedelta(0)
        assert reloaded.updated_at.utcoffset() == timedelta(0)

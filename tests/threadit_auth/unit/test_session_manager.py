"""Unit tests for SessionManager."""

from tests.fakes import InMemoryRedis
from threadit_auth import HttpSession, SessionManager
from threadit_auth.persistence.redis import RedisSessionStore

MAX_AGE = 60 * 60


class TestSessionManager:
    def setup_method(self):
        self.redis = InMemoryRedis()
        self.manager = SessionManager(RedisSessionStore(self.redis), MAX_AGE)

    async def test_load_without_id_starts_anonymous_session(self):
        session = await self.manager.load(None)

        assert session.is_new is True
        assert self.manager.current_user_id(session) is None
        # Nothing is written for anonymous visitors
        assert self.redis.keys_with_prefix("sess:") == []

    async def test_bind_persists_user_id(self):
        session = await self.manager.load(None)

        await self.manager.bind(session, 5)

        reloaded = await self.manager.load(session.session_id)
        assert reloaded.is_new is False
        assert self.manager.current_user_id(reloaded) == 5
        assert self.redis.ttl_of(f"sess:{session.session_id}") == MAX_AGE

    async def test_unknown_session_id_gets_a_new_id(self):
        session = await self.manager.load("forgotten-id")

        assert session.session_id != "forgotten-id"
        assert session.is_new is True

    async def test_destroy_removes_session(self):
        session = await self.manager.load(None)
        await self.manager.bind(session, 5)

        assert await self.manager.destroy(session) is True

        assert session.destroyed is True
        assert self.manager.current_user_id(session) is None
        reloaded = await self.manager.load(session.session_id)
        assert self.manager.current_user_id(reloaded) is None

    async def test_destroy_reports_store_failure(self):
        session = await self.manager.load(None)
        await self.manager.bind(session, 5)
        self.redis.failing.add("delete")

        assert await self.manager.destroy(session) is False

        assert session.destroyed is False
        assert self.manager.current_user_id(session) == 5

    def test_session_repr_hides_full_id(self):
        session = HttpSession(session_id="abcdefghijklmnop")

        assert "abcdefghijklmnop" not in repr(session)

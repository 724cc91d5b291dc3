"""Session binding on top of a server-side session store."""

import logging

from threadit_auth.exceptions import SessionStoreError
from threadit_auth.repositories import SessionStore
from threadit_auth.schemas import HttpSession

logger = logging.getLogger(__name__)


class SessionManager:
    """Binds an authenticated user id to a client's session.

    The manager owns the session lifecycle: it loads the session named by
    the (already verified) cookie, writes it back when the identity
    changes, and removes it on logout. It never touches the cookie
    itself; the transport layer sets or clears it based on the results.
    """

    USER_ID_KEY = "userId"

    def __init__(self, store: SessionStore, max_age_seconds: int):
        self._store = store
        self._max_age_seconds = max_age_seconds

    async def load(self, session_id: str | None) -> HttpSession:
        """Load an existing session or start a fresh anonymous one."""
        if session_id is None:
            return HttpSession.create()

        data = await self._store.load(session_id)
        if data is None:
            # Unknown, expired or destroyed: never revive the old id
            logger.debug("Session not found, starting a new one")
            return HttpSession.create()

        return HttpSession(session_id=session_id, data=data, is_new=False)

    async def bind(self, session: HttpSession, user_id: int) -> None:
        """Set the authenticated identity on the session and persist it."""
        session.data[self.USER_ID_KEY] = user_id
        await self._store.save(session.session_id, session.data, self._max_age_seconds)
        session.is_new = False
        logger.debug("Session bound to user: %s", user_id)

    def current_user_id(self, session: HttpSession) -> int | None:
        value = session.data.get(self.USER_ID_KEY)
        if value is None:
            return None
        return int(value)

    async def destroy(self, session: HttpSession) -> bool:
        """Terminate the session server-side.

        Returns
        -------
        True when the session is gone from the store, False when the store
        could not be reached (the caller must then keep the cookie)
        """
        try:
            await self._store.delete(session.session_id)
        except SessionStoreError as e:
            logger.error("Failed to destroy session: %s", e)
            return False

        session.data.clear()
        session.destroyed = True
        return True

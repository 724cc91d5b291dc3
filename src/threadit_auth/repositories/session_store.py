"""Abstract store interface for server-side sessions."""

from abc import ABC, abstractmethod
from typing import Any


class SessionStore(ABC):
    """Keeps session payloads keyed by session id.

    Implementations raise SessionStoreError when the backing store is
    unavailable.
    """

    @abstractmethod
    async def load(self, session_id: str) -> dict[str, Any] | None:
        """Return the session payload, or None if absent or expired."""

    @abstractmethod
    async def save(
        self,
        session_id: str,
        data: dict[str, Any],
        ttl_seconds: int,
    ) -> None:
        """Write the session payload with an expiry."""

    @abstractmethod
    async def delete(self, session_id: str) -> None:
        """Remove the session. Removing an unknown session is not an error."""

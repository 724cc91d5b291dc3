"""Auth schemas and data structures."""

from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from typing import Any


@dataclass
class HttpSession:
    """Server-held state of one client, addressed by an opaque session id.

    Attributes
    ----------
    session_id
        Random identifier delivered to the client in the session cookie
    data
        Mutable session payload (the authenticated user id lives here)
    is_new
        True until the session has been written to the store
    destroyed
        Set once the session was removed from the store
    """

    session_id: str
    data: dict[str, Any] = field(default_factory=dict)
    is_new: bool = True
    destroyed: bool = False

    @classmethod
    def create(cls) -> HttpSession:
        return cls(session_id=secrets.token_urlsafe(32))

    def __repr__(self) -> str:
        # Never print the full session id
        return (
            f"HttpSession(session_id={self.session_id[:6]}..., "
            f"is_new={self.is_new}, destroyed={self.destroyed})"
        )

"""Abstract store interfaces for authentication."""

from threadit_auth.repositories.reset_token_store import ResetTokenStore
from threadit_auth.repositories.session_store import SessionStore

__all__ = [
    "ResetTokenStore",
    "SessionStore",
]

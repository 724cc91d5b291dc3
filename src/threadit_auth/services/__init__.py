"""Authentication services.

Provides password hashing and session binding.
"""

from threadit_auth.services.password_service import PasswordHashingService
from threadit_auth.services.session_manager import SessionManager

__all__ = [
    "PasswordHashingService",
    "SessionManager",
]

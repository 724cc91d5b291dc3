"""Authentication exceptions.

These exceptions are raised by the threadit_auth package and should be
caught and handled by the application layer.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class WeakPasswordError(AuthError):
    """Raised when a password cannot be hashed (e.g. it is empty)."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class SessionStoreError(AuthError):
    """Raised when the session store cannot be reached or written."""

    def __init__(self, message: str = "Session store unavailable"):
        super().__init__(message)

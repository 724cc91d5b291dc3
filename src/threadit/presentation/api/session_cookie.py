"""Signed session cookie encoding.

The cookie value is the session id signed with the application secret.
The id itself is opaque; the signature only proves this server issued it.
"""

from typing import Optional

from itsdangerous import BadSignature, URLSafeSerializer

SESSION_COOKIE_SALT = "session"


class SessionCookie:
    """Signs and verifies the session id carried in the cookie.

    Examples
    --------
    >>> cookie = SessionCookie("secret")
    >>> value = cookie.dumps("abc")
    >>> cookie.loads(value)
    'abc'
    >>> cookie.loads("tampered") is None
    True
    """

    def __init__(self, secret_key: str):
        self._serializer = URLSafeSerializer(secret_key, salt=SESSION_COOKIE_SALT)

    def dumps(self, session_id: str) -> str:
        return self._serializer.dumps(session_id)

    def loads(self, value: Optional[str]) -> Optional[str]:
        """Return the session id, or None for a missing or forged cookie."""
        if not value:
            return None
        try:
            session_id = self._serializer.loads(value)
        except BadSignature:
            return None
        if not isinstance(session_id, str):
            return None
        return session_id

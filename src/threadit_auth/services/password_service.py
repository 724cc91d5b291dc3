"""Password hashing service using argon2id.

Provides salted, memory-hard password hashing and verification.
"""

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError

from threadit_auth.exceptions import WeakPasswordError


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses argon2id with a random salt embedded in every hash, so hashing
    the same password twice yields two different strings.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify(hash, "my_secure_password")
    True
    >>> service.verify(hash, "wrong_password")
    False
    """

    def __init__(
        self,
        time_cost: int = 3,
        memory_cost: int = 65536,
        parallelism: int = 4,
    ):
        """Initialize the password hashing service.

        Parameters
        ----------
        time_cost
            Number of argon2 iterations.
        memory_cost
            Memory usage in KiB. The default (64 MiB) follows the
            argon2-cffi recommendation; tests pass a much smaller value.
        parallelism
            Number of parallel lanes.
        """
        self._hasher = PasswordHasher(
            time_cost=time_cost,
            memory_cost=memory_cost,
            parallelism=parallelism,
            type=Type.ID,
        )

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The encoded argon2 hash (parameters and salt included)

        Raises
        ------
        WeakPasswordError
            If the password is empty
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)
        return self._hasher.hash(password)

    def verify(self, password_hash: str, password: str) -> bool:
        """Verify a password against a stored hash.

        Parameters
        ----------
        password_hash
            The stored argon2 hash
        password
            The plaintext password to check

        Returns
        -------
        True if password matches, False otherwise (including malformed
        hashes)
        """
        try:
            return self._hasher.verify(password_hash, password)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, password_hash: str) -> bool:
        """Check if a hash was made with parameters other than the current ones.

        Parameters
        ----------
        password_hash
            The existing hash to check

        Returns
        -------
        True if the hash should be regenerated
        """
        try:
            return self._hasher.check_needs_rehash(password_hash)
        except InvalidHashError:
            return True

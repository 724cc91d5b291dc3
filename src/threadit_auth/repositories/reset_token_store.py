"""Abstract store interface for password reset tokens."""

from abc import ABC, abstractmethod


class ResetTokenStore(ABC):
    """Issues opaque reset tokens and maps them to a user id until expiry.

    A token moves from issued to consumed or expired; neither end state
    leads back to issued for the same token value.
    """

    @abstractmethod
    async def issue(self, user_id: int, ttl_seconds: int) -> str:
        """Create a new reset token for a user.

        Parameters
        ----------
        user_id
            The user the token proves email ownership for
        ttl_seconds
            Lifetime of the token

        Returns
        -------
        The raw token (to be embedded in the reset link)
        """

    @abstractmethod
    async def resolve(self, token: str) -> int | None:
        """Look up the user id behind a token.

        Returns
        -------
        The user id, or None if the token never existed or has expired
        """

    @abstractmethod
    async def consume(self, token: str) -> None:
        """Delete a token so it cannot be redeemed again.

        Deleting an unknown token is not an error.
        """

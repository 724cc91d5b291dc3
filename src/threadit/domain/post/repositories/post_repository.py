"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from threadit.domain.post.aggregates.post import Post


class PostRepository(ABC):
    """Repository interface for Post aggregates."""

    @abstractmethod
    async def list_all(self) -> list[Post]:
        """List all posts, oldest first."""

    @abstractmethod
    async def find_by_id(self, post_id: int) -> Optional[Post]:
        """Find a post by its ID."""

    @abstractmethod
    async def create(self, title: str) -> Post:
        """Create a post and return it with its assigned ID."""

    @abstractmethod
    async def update_title(self, post_id: int, title: str | None) -> Optional[Post]:
        """Rename a post.

        Returns None if the post does not exist. A ``title`` of None leaves
        the post unchanged.
        """

    @abstractmethod
    async def delete(self, post_id: int) -> None:
        """Delete a post. Deleting an unknown ID is not an error."""

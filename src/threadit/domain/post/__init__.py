"""Post domain: simple titled records with plain CRUD semantics."""

from threadit.domain.post.aggregates import Post
from threadit.domain.post.repositories import PostRepository

__all__ = [
    "Post",
    "PostRepository",
]

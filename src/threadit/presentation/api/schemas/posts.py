"""Post schemas for request/response models."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from threadit.domain.post import Post
from threadit.presentation.api.schemas.auth import CamelModel


class PostCreateRequest(CamelModel):
    title: str


class PostUpdateRequest(CamelModel):
    title: Optional[str] = Field(None, description="New title; omit to keep the current one")


class PostSchema(CamelModel):
    id: int
    title: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, post: Post) -> "PostSchema":
        return cls(
            id=post.id,
            title=post.title,
            created_at=post.created_at,
            updated_at=post.updated_at,
        )

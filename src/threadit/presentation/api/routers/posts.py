"""Posts router: plain CRUD over titled posts."""

import logging
from typing import Optional

from fastapi import APIRouter

from threadit.presentation.api.dependencies import DBSession, PostRepo
from threadit.presentation.api.schemas.posts import (
    PostCreateRequest,
    PostSchema,
    PostUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List posts")
async def list_posts(posts: PostRepo) -> list[PostSchema]:
    return [PostSchema.from_domain(post) for post in await posts.list_all()]


@router.get("/{post_id}", summary="Get a post")
async def get_post(post_id: int, posts: PostRepo) -> Optional[PostSchema]:
    post = await posts.find_by_id(post_id)
    if post is None:
        return None
    return PostSchema.from_domain(post)


@router.post("", summary="Create a post")
async def create_post(
    request: PostCreateRequest,
    posts: PostRepo,
    session: DBSession,
) -> PostSchema:
    post = await posts.create(request.title)
    await session.commit()
    logger.info("Post created: %s", post.id)
    return PostSchema.from_domain(post)


@router.patch("/{post_id}", summary="Rename a post")
async def update_post(
    post_id: int,
    request: PostUpdateRequest,
    posts: PostRepo,
    session: DBSession,
) -> Optional[PostSchema]:
    """Returns null if the post does not exist."""
    post = await posts.update_title(post_id, request.title)
    if post is None:
        return None
    await session.commit()
    return PostSchema.from_domain(post)


@router.delete("/{post_id}", summary="Delete a post")
async def delete_post(post_id: int, posts: PostRepo, session: DBSession) -> bool:
    """Deleting a post that does not exist also returns true."""
    await posts.delete(post_id)
    await session.commit()
    return True

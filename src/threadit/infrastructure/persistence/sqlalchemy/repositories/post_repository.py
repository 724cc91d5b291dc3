"""SQLAlchemy implementation of PostRepository."""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from threadit.domain.post import Post, PostRepository
from threadit.domain.shared.time import ensure_tz_aware, utc_now
from threadit.infrastructure.persistence.sqlalchemy.models import PostModel

logger = logging.getLogger(__name__)


class PostRepositorySQLAlchemy(PostRepository):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Post]:
        stmt = select(PostModel).order_by(PostModel.id)
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def find_by_id(self, post_id: int) -> Optional[Post]:
        model = await self._session.get(PostModel, post_id)
        if model is None:
            return None
        return self._map_to_domain(model)

    async def create(self, title: str) -> Post:
        model = PostModel(title=title)
        self._session.add(model)
        await self._session.flush()
        logger.debug("Created post: %s", model.id)
        return self._map_to_domain(model)

    async def update_title(self, post_id: int, title: str | None) -> Optional[Post]:
        model = await self._session.get(PostModel, post_id)
        if model is None:
            return None

        if title is not None:
            model.title = title
            model.updated_at = utc_now()
            await self._session.flush()

        return self._map_to_domain(model)

    async def delete(self, post_id: int) -> None:
        model = await self._session.get(PostModel, post_id)
        if model is None:
            return
        await self._session.delete(model)
        await self._session.flush()
        logger.debug("Deleted post: %s", post_id)

    def _map_to_domain(self, model: PostModel) -> Post:
        return Post.reconstitute(
            id=model.id,
            title=model.title,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

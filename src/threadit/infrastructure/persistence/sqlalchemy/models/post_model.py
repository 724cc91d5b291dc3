"""SQLAlchemy model for Post aggregate."""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from threadit.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class PostModel(Base, TimestampMixin):
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<PostModel(id={self.id}, title={self.title!r})>"

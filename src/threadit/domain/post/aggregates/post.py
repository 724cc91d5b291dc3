"""Post aggregate."""

from datetime import datetime

from threadit.domain.shared.time import utc_now


class Post:
    def __init__(
        self,
        title: str,
        id: int | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._id = id
        self._title = title
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @classmethod
    def reconstitute(
        cls,
        id: int,
        title: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Post":
        return cls(id=id, title=title, created_at=created_at, updated_at=updated_at)

    def __repr__(self) -> str:
        return f"Post(id={self._id}, title={self._title!r})"

"""SQLAlchemy models.

Importing this package registers every table with ``Base.metadata``.
"""

from threadit.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from threadit.infrastructure.persistence.sqlalchemy.models.post_model import PostModel
from threadit.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "PostModel",
    "TimestampMixin",
    "UserModel",
]

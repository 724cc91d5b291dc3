from threadit.infrastructure.persistence.sqlalchemy.repositories.post_repository import (  # noqa: E501
    PostRepositorySQLAlchemy,
)
from threadit.infrastructure.persistence.sqlalchemy.repositories.user_repository import (  # noqa: E501
    UserRepositorySQLAlchemy,
)

__all__ = [
    "PostRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]

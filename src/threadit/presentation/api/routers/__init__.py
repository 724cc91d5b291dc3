from threadit.presentation.api.routers.auth import router as auth_router
from threadit.presentation.api.routers.posts import router as posts_router

__all__ = [
    "auth_router",
    "posts_router",
]

from threadit.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    FieldErrorSchema,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    UserSchema,
)
from threadit.presentation.api.schemas.posts import (
    PostCreateRequest,
    PostSchema,
    PostUpdateRequest,
)

__all__ = [
    "ChangePasswordRequest",
    "FieldErrorSchema",
    "ForgotPasswordRequest",
    "LoginRequest",
    "PostCreateRequest",
    "PostSchema",
    "PostUpdateRequest",
    "RegisterRequest",
    "UserResponse",
    "UserSchema",
]

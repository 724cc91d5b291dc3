"""Authentication schemas for request/response models.

Field names travel in camelCase on the wire (``usernameOrEmail``,
``newPassword``, ``createdAt``).
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from threadit.application.dtos import FieldError, UserResult
from threadit.domain.user import User


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RegisterRequest(CamelModel):
    """Request schema for user registration.

    Lengths and the "@" rules are checked by the service so failures come
    back as field errors rather than 422 responses.
    """

    username: str
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "alice@example.com",
                "password": "secret123",
            },
        },
    )


class LoginRequest(CamelModel):
    """Request schema for user login."""

    username_or_email: str = Field(..., description="Username, or email if it has an @")
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "usernameOrEmail": "alice",
                "password": "secret123",
            },
        },
    )


class ForgotPasswordRequest(CamelModel):
    email: str


class ChangePasswordRequest(CamelModel):
    """Request schema for redeeming a password reset token."""

    token: str
    new_password: str


class FieldErrorSchema(CamelModel):
    field: str
    message: str

    @classmethod
    def from_domain(cls, error: FieldError) -> "FieldErrorSchema":
        return cls(field=error.field, message=error.message)


class UserSchema(CamelModel):
    """Public view of an account. The password hash is never included."""

    id: int
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, user: User) -> "UserSchema":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserResponse(CamelModel):
    """Either a user or a list of field errors."""

    errors: Optional[list[FieldErrorSchema]] = None
    user: Optional[UserSchema] = None

    @classmethod
    def from_result(cls, result: UserResult) -> "UserResponse":
        if result.errors:
            return cls(errors=[FieldErrorSchema.from_domain(e) for e in result.errors])
        return cls(user=UserSchema.from_domain(result.user))

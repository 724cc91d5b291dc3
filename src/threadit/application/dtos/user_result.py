"""Result types returned by the authentication use cases."""

from dataclasses import dataclass, field
from typing import Optional

from threadit.domain.user import User


@dataclass(frozen=True)
class FieldError:
    """A validation failure attributed to one named input field."""

    field: str
    message: str

    def to_dict(self) -> dict:
        return {"field": self.field, "message": self.message}


@dataclass(frozen=True)
class UserResult:
    """Outcome of register, login and change-password.

    Exactly one of ``user`` and ``errors`` is populated.
    """

    user: Optional[User] = None
    errors: list[FieldError] = field(default_factory=list)

    @classmethod
    def ok(cls, user: User) -> "UserResult":
        return cls(user=user)

    @classmethod
    def fail(cls, field_name: str, message: str) -> "UserResult":
        return cls(errors=[FieldError(field=field_name, message=message)])

    @property
    def success(self) -> bool:
        return not self.errors

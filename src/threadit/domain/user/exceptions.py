"""User domain exceptions."""

from threadit.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
)


class UniqueConstraintViolationError(ConflictError):
    """An insert collided with the unique username or email constraint.

    ``field`` names the column the store reported, when it could be told
    apart; it is None otherwise.
    """

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        target = field or "username or email"
        super().__init__(
            f"An account with this {target} already exists",
            code=ErrorCode.UNIQUE_CONSTRAINT_VIOLATION,
            details={"field": field},
        )

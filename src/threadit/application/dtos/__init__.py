from threadit.application.dtos.user_result import FieldError, UserResult

__all__ = [
    "FieldError",
    "UserResult",
]

"""Input validation for account registration and password changes."""

from typing import Optional

from threadit.application.dtos import FieldError

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 4

USERNAME_TOO_SHORT = "Username must be greater than 2"
USERNAME_HAS_AT_SIGN = 'Username cannot have "@" sign'
INVALID_EMAIL = "Invalid email"
PASSWORD_TOO_SHORT = "Password must be greater than 3"


def validate_password(
    password: str,
    field_name: str = "password",
) -> Optional[FieldError]:
    if len(password) < MIN_PASSWORD_LENGTH:
        return FieldError(field=field_name, message=PASSWORD_TOO_SHORT)
    return None


def validate_register(
    username: str,
    email: str,
    password: str,
) -> Optional[FieldError]:
    """Validate registration input, stopping at the first failure.

    Checks run in a fixed order: username length, "@" in username, "@" in
    email, password length.

    Returns
    -------
    The first FieldError found, or None if the input is acceptable
    """
    if len(username) < MIN_USERNAME_LENGTH:
        return FieldError(field="username", message=USERNAME_TOO_SHORT)

    # "@" marks an email in login lookups, so usernames may not contain it
    if "@" in username:
        return FieldError(field="username", message=USERNAME_HAS_AT_SIGN)

    if "@" not in email:
        return FieldError(field="email", message=INVALID_EMAIL)

    return validate_password(password)

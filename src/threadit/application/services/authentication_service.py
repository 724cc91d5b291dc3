"""Authentication service for accounts, sessions and password recovery."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Awaitable, Callable, Optional

from threadit.application.dtos import UserResult
from threadit.application.validation import validate_password, validate_register
from threadit.domain.user import UniqueConstraintViolationError, User

if TYPE_CHECKING:
    from threadit.domain.user import UserRepository
    from threadit.infrastructure.email import EmailService
    from threadit_auth import (
        HttpSession,
        PasswordHashingService,
        ResetTokenStore,
        SessionManager,
    )

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already taken"
ACCOUNT_NOT_FOUND = "Username or email does not exist."
INCORRECT_PASSWORD = "Incorrect password."
TOKEN_EXPIRED = "Token Expired"
TOKEN_USER_MISSING = "User does not exist."


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates threadit_auth infrastructure (password hashing, sessions,
    reset tokens) with the threadit User domain to provide:
    - Registration and login
    - Session lookup and logout
    - Password recovery via emailed, single-use reset tokens

    Field-level failures are returned in ``UserResult.errors``. Store
    faults are not caught here and propagate to the caller.
    """

    def __init__(  # noqa: PLR0913
        self,
        user_repository: UserRepository,
        token_store: ResetTokenStore,
        session_manager: SessionManager,
        password_service: PasswordHashingService,
        email_service: EmailService,
        frontend_base_url: str,
        reset_token_ttl_seconds: int,
    ):
        self._user_repo = user_repository
        self._token_store = token_store
        self._session_manager = session_manager
        self._password_service = password_service
        self._email_service = email_service
        self._frontend_base_url = frontend_base_url.rstrip("/")
        self._reset_token_ttl_seconds = reset_token_ttl_seconds

    async def register(
        self,
        username: str,
        email: str,
        password: str,
        session: HttpSession,
    ) -> UserResult:
        error = validate_register(username, email, password)
        if error is not None:
            return UserResult(errors=[error])

        password_hash = self._password_service.hash(password)

        # The unique constraint decides duplicates; no pre-check, it would race
        try:
            user = await self._user_repo.insert(username, email, password_hash)
        except UniqueConstraintViolationError as e:
            logger.info(
                "Registration rejected, duplicate %s: %s",
                e.field or "username or email",
                username,
            )
            return UserResult.fail("username", USERNAME_TAKEN)

        await self._session_manager.bind(session, user.id)

        logger.info("User registered: %s (id: %s)", user.username, user.id)
        return UserResult.ok(user)

    async def login(
        self,
        username_or_email: str,
        password: str,
        session: HttpSession,
    ) -> UserResult:
        user = await self._user_repo.find_by_username_or_email(username_or_email)
        if user is None:
            return UserResult.fail("usernameOrEmail", ACCOUNT_NOT_FOUND)

        if not self._password_service.verify(user.password_hash, password):
            logger.info("Failed login for user: %s", user.id)
            return UserResult.fail("password", INCORRECT_PASSWORD)

        if self._password_service.needs_rehash(user.password_hash):
            user.change_password_hash(self._password_service.hash(password))
            await self._user_repo.update(user)
            logger.info("Password hash upgraded for user: %s", user.id)

        await self._session_manager.bind(session, user.id)

        logger.info("User logged in: %s", user.username)
        return UserResult.ok(user)

    async def me(self, session: HttpSession) -> Optional[User]:
        user_id = self._session_manager.current_user_id(session)
        if user_id is None:
            return None
        # None if the account vanished under a live session
        return await self._user_repo.find_by_id(user_id)

    async def logout(self, session: HttpSession) -> bool:
        user_id = self._session_manager.current_user_id(session)
        destroyed = await self._session_manager.destroy(session)
        if destroyed:
            logger.info("User logged out: %s", user_id)
        return destroyed

    async def forgot_password(self, email: str) -> bool:
        """Issue a reset token and email the reset link.

        Always returns True so the response does not reveal whether an
        account exists for ``email``. Email delivery failures are logged
        and otherwise ignored.
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.debug("Password reset requested for unknown email")
            return True

        token = await self._token_store.issue(user.id, self._reset_token_ttl_seconds)
        reset_link = self.build_reset_link(token)

        try:
            sent = await asyncio.to_thread(
                self._email_service.send_password_reset_email,
                user.email,
                reset_link,
            )
        except Exception as e:
            logger.error("Failed to send password reset email to user %s: %s", user.id, e)
            return True

        if sent:
            logger.info("Password reset email sent to user: %s", user.id)
        return True

    async def change_password(
        self,
        token: str,
        new_password: str,
        commit: Optional[Callable[[], Awaitable[None]]] = None,
    ) -> UserResult:
        """Redeem a reset token and set a new password.

        The new password is checked first, so a rejected password leaves
        the token valid. The token is consumed only after the new hash is
        persisted.

        Parameters
        ----------
        token
            Reset token from the emailed link
        new_password
            Plain text password to set
        commit
            Awaited after the update and before the token is consumed. If
            it raises, the token stays valid and the error propagates.

        Notes
        -----
        Resolve and consume are two store calls. Two concurrent requests
        with the same token can both resolve it before either consumes it.
        """
        error = validate_password(new_password, field_name="newPassword")
        if error is not None:
            return UserResult(errors=[error])

        user_id = await self._token_store.resolve(token)
        if user_id is None:
            return UserResult.fail("token", TOKEN_EXPIRED)

        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            return UserResult.fail("token", TOKEN_USER_MISSING)

        user.change_password_hash(self._password_service.hash(new_password))
        await self._user_repo.update(user)
        if commit is not None:
            await commit()
        await self._token_store.consume(token)

        logger.info("Password changed for user: %s", user.id)
        return UserResult.ok(user)

    def build_reset_link(self, token: str) -> str:
        return f"{self._frontend_base_url}/change-password/{token}"

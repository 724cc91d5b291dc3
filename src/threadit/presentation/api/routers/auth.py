"""Authentication router for registration, login, sessions and password reset."""

import logging
from typing import Optional

from fastapi import APIRouter, Response

from threadit.presentation.api.dependencies import (
    AuthService,
    ClientSession,
    DBSession,
    LogoutSession,
    SessionCookieDep,
    SettingsDep,
)
from threadit.presentation.api.schemas.auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    LoginRequest,
    RegisterRequest,
    UserResponse,
    UserSchema,
)
from threadit.presentation.api.session_cookie import SessionCookie
from threadit_auth import HttpSession
from threadit_config.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter()


def _set_session_cookie(
    response: Response,
    session: HttpSession,
    cookie: SessionCookie,
    settings: Settings,
) -> None:
    """Attach the signed session id to the response.

    This cookie is:
    - HttpOnly: Not accessible to JavaScript
    - SameSite: lax by default
    - Secure: Only sent over HTTPS (when session_cookie_secure=True)
    """
    response.set_cookie(
        key=settings.session_cookie_name,
        value=cookie.dumps(session.session_id),
        max_age=settings.session_max_age_seconds,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite=settings.session_cookie_samesite,
        path="/",
        domain=settings.session_cookie_domain,
    )


def _clear_session_cookie(response: Response, settings: Settings) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        domain=settings.session_cookie_domain,
    )


@router.post("/register", summary="Register a new user")
async def register(
    request: RegisterRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    client_session: ClientSession,
    cookie: SessionCookieDep,
    settings: SettingsDep,
) -> UserResponse:
    """
    Create an account and log it in.

    Validation failures and a taken username come back in ``errors``.
    """
    try:
        result = await auth_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
            session=client_session,
        )
    except Exception:
        await session.rollback()
        logger.exception("Registration failed")
        raise

    if not result.success:
        await session.rollback()
        return UserResponse.from_result(result)

    await session.commit()
    _set_session_cookie(response, client_session, cookie, settings)
    return UserResponse.from_result(result)


@router.post("/login", summary="Authenticate user")
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService,
    session: DBSession,
    client_session: ClientSession,
    cookie: SessionCookieDep,
    settings: SettingsDep,
) -> UserResponse:
    """
    Authenticate with username (or email) and password.

    On success the session cookie is set on the response.
    """
    result = await auth_service.login(
        username_or_email=request.username_or_email,
        password=request.password,
        session=client_session,
    )
    if not result.success:
        return UserResponse.from_result(result)

    # Persists an upgraded password hash, if login produced one
    await session.commit()
    _set_session_cookie(response, client_session, cookie, settings)
    return UserResponse.from_result(result)


@router.post("/logout", summary="End the current session")
async def logout(
    response: Response,
    auth_service: AuthService,
    client_session: LogoutSession,
    settings: SettingsDep,
) -> bool:
    """
    Destroy the session server-side.

    Returns false, and keeps the cookie, if the session store could not
    be reached.
    """
    if client_session is None:
        return False

    destroyed = await auth_service.logout(client_session)
    if destroyed:
        _clear_session_cookie(response, settings)
    return destroyed


@router.get("/me", summary="Get the logged in user")
async def me(
    auth_service: AuthService,
    client_session: ClientSession,
) -> Optional[UserSchema]:
    user = await auth_service.me(client_session)
    if user is None:
        return None
    return UserSchema.from_domain(user)


@router.post("/forgot-password", summary="Request a password reset email")
async def forgot_password(
    request: ForgotPasswordRequest,
    auth_service: AuthService,
) -> bool:
    """
    Email a password reset link if an account uses this address.

    Always returns true so callers cannot probe which emails are registered.
    """
    return await auth_service.forgot_password(request.email)


@router.post("/change-password", summary="Set a new password with a reset token")
async def change_password(
    request: ChangePasswordRequest,
    auth_service: AuthService,
    session: DBSession,
) -> UserResponse:
    try:
        result = await auth_service.change_password(
            token=request.token,
            new_password=request.new_password,
            commit=session.commit,
        )
    except Exception:
        await session.rollback()
        logger.exception("Password change failed")
        raise

    return UserResponse.from_result(result)

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ziva_admin.config import get_settings
from ziva_admin.core.constants import SESSION_COOKIE_NAME
from ziva_admin.core.errors import StorefrontError
from ziva_admin.schemas.session import LoginRequest, SessionInfo, Token
from ziva_admin.services.session_service import end_admin_session, start_admin_session
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient
from ziva_admin.utils.auth import (
    create_session_token,
    get_admin_session,
    get_client_factory,
    session_expiry_seconds,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/login", response_model=Token)
async def login(
    response: Response,
    credentials: LoginRequest,
    client_factory: Callable[[str | None], StorefrontClient] = Depends(get_client_factory),
):
    """Start an admin session with a storefront bearer token"""
    try:
        session = await start_admin_session(credentials.token, client_factory)
    except StorefrontError as e:
        if e.status_code in (status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN):
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Storefront rejected the token",
            )
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=e.message)

    token = create_session_token(session)

    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=token,
        httponly=True,
        secure=get_settings().session_cookie_secure,
        samesite="strict",
        max_age=session_expiry_seconds(session),
    )

    return Token(access_token=token)


@router.post("/logout")
async def logout(response: Response, session: AdminSession = Depends(get_admin_session)):
    """End the admin session and clear the session cookie"""
    end_admin_session(session)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return {"message": "Logged out successfully"}


@router.get("/me", response_model=SessionInfo)
async def get_me(session: AdminSession = Depends(get_admin_session)):
    """Get current session info"""
    return SessionInfo(
        session_id=session.session_id,
        created_at=session.created_at,
        expires_at=session.expires_at,
        categories_loaded=len(session.store),
    )

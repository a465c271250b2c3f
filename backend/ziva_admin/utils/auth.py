from collections.abc import Callable
from datetime import datetime

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ziva_admin.config import get_settings
from ziva_admin.core.constants import SESSION_COOKIE_NAME
from ziva_admin.sessions import AdminSession, sessions
from ziva_admin.storefront.client import StorefrontClient, get_storefront_client

security = HTTPBearer(auto_error=False)


def create_session_token(session: AdminSession) -> str:
    """Create a signed JWT pointing at a server-side admin session"""
    settings = get_settings()
    to_encode = {
        "sub": session.session_id,
        "exp": session.expires_at,
    }
    return jwt.encode(to_encode, settings.session_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and validate a session JWT"""
    settings = get_settings()
    try:
        payload = jwt.decode(
            token, settings.session_secret, algorithms=[settings.jwt_algorithm]
        )
        return payload
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )


def _token_from_request(
    request: Request, credentials: HTTPAuthorizationCredentials | None
) -> str | None:
    # Authorization header first, then the session cookie
    if credentials:
        return credentials.credentials
    return request.cookies.get(SESSION_COOKIE_NAME)


def _lookup_session(token: str) -> AdminSession | None:
    payload = decode_token(token)
    session_id = payload.get("sub")
    if not session_id:
        return None
    return sessions.get(session_id)


async def get_admin_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AdminSession:
    """Get the current admin session from the session JWT"""
    token = _token_from_request(request, credentials)

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session = _lookup_session(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or signed out",
        )

    return session


async def get_optional_admin_session(
    request: Request,
    credentials: HTTPAuthorizationCredentials = Depends(security),
) -> AdminSession | None:
    """Like get_admin_session, but returns None so pages can redirect to login."""
    token = _token_from_request(request, credentials)
    if not token:
        return None
    try:
        return _lookup_session(token)
    except HTTPException:
        return None


def get_client_factory() -> Callable[[str | None], StorefrontClient]:
    """Factory for storefront clients; overridden in tests to inject a transport"""
    return get_storefront_client


async def get_session_client(
    session: AdminSession = Depends(get_admin_session),
    client_factory: Callable[[str | None], StorefrontClient] = Depends(get_client_factory),
) -> StorefrontClient:
    """Storefront client carrying the session's bearer token"""
    return client_factory(session.token)


def session_expiry_seconds(session: AdminSession) -> int:
    """Remaining lifetime, for the cookie max-age"""
    remaining = session.expires_at - datetime.now(session.expires_at.tzinfo)
    return max(0, int(remaining.total_seconds()))

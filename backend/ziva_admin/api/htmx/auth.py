"""HTMX routes for signing in and out of the dashboard."""

import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from ziva_admin.config import get_settings
from ziva_admin.core.constants import SESSION_COOKIE_NAME
from ziva_admin.core.errors import StorefrontError
from ziva_admin.services.session_service import end_admin_session, start_admin_session
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient
from ziva_admin.utils.auth import (
    create_session_token,
    get_client_factory,
    get_optional_admin_session,
    session_expiry_seconds,
)

from .utils import templates

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    session: AdminSession | None = Depends(get_optional_admin_session),
):
    """Sign-in page asking for the storefront admin token."""
    if session is not None:
        return RedirectResponse(url="/app/categories", status_code=303)

    return templates.TemplateResponse(
        request=request,
        name="pages/login.html",
        context={"current_path": "/app/login", "error": None},
    )


@router.post("/login", response_class=HTMLResponse)
async def login_submit(
    request: Request,
    token: str = Form(""),
    client_factory: Callable[[str | None], StorefrontClient] = Depends(get_client_factory),
):
    token = token.strip()
    error = None
    if not token:
        error = "Token is required"
    else:
        try:
            session = await start_admin_session(token, client_factory)
        except StorefrontError as e:
            error = e.message

    if error:
        return templates.TemplateResponse(
            request=request,
            name="pages/login.html",
            context={"current_path": "/app/login", "error": error},
            status_code=401,
        )

    response = RedirectResponse(url="/app/categories", status_code=303)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=create_session_token(session),
        httponly=True,
        secure=get_settings().session_cookie_secure,
        samesite="strict",
        max_age=session_expiry_seconds(session),
    )
    return response


@router.post("/logout")
async def logout(session: AdminSession | None = Depends(get_optional_admin_session)):
    if session is not None:
        end_admin_session(session)

    response = RedirectResponse(url="/app/login", status_code=303)
    response.delete_cookie(SESSION_COOKIE_NAME)
    return response

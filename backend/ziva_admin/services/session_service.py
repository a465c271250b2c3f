"""
Admin session lifecycle: sign in with a storefront token, sign out.
"""

import logging
from collections.abc import Callable
from datetime import timedelta

from ziva_admin.categories.stats import refresh_product_count
from ziva_admin.categories.store import CategoryStore
from ziva_admin.config import get_settings
from ziva_admin.sessions import AdminSession, sessions
from ziva_admin.storefront.client import StorefrontClient

logger = logging.getLogger(__name__)


async def start_admin_session(
    token: str,
    client_factory: Callable[[str | None], StorefrontClient],
) -> AdminSession:
    """
    Open a session for a storefront bearer token.

    The token is checked by loading the category tree with it, so a rejected
    token raises StorefrontError and no session is created.
    """
    settings = get_settings()
    client = client_factory(token)

    categories = await client.list_categories()
    session = sessions.create(
        token,
        ttl=timedelta(hours=settings.session_expire_hours),
        store=CategoryStore.from_payload(categories),
    )
    await refresh_product_count(session, client)

    logger.info(
        f"Session {session.session_id[:8]} loaded {len(session.store)} categories, "
        f"{session.product_count} products"
    )
    return session


def end_admin_session(session: AdminSession) -> None:
    """Drop the session and everything it holds, token included."""
    sessions.end(session.session_id)

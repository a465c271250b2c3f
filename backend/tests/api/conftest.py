"""
API test fixtures.

The app runs in-process behind httpx.ASGITransport. Storefront clients built
by the app are pointed at the StorefrontStub through a dependency override.
"""

from typing import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from ziva_admin.sessions import sessions


@pytest_asyncio.fixture
async def anon_client(storefront) -> AsyncGenerator[AsyncClient, None]:
    """Client without a session; storefront calls go to the stub."""
    from ziva_admin.main import app
    from ziva_admin.utils.auth import get_client_factory

    app.dependency_overrides[get_client_factory] = lambda: storefront.client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
    sessions.clear()


@pytest_asyncio.fixture
async def live_session(category_store):
    """A session registered the same way login registers one."""
    from datetime import timedelta

    from tests.conftest import STOREFRONT_TOKEN

    session = sessions.create(STOREFRONT_TOKEN, ttl=timedelta(hours=1), store=category_store)
    yield session
    sessions.end(session.session_id)


@pytest_asyncio.fixture
async def test_client(anon_client, live_session) -> AsyncGenerator[AsyncClient, None]:
    """Client authenticated with the live session's JWT in the Authorization header."""
    from ziva_admin.utils.auth import create_session_token

    anon_client.headers["Authorization"] = f"Bearer {create_session_token(live_session)}"
    yield anon_client

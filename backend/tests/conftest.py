"""
Pytest fixtures for Ziva Admin tests.

The storefront never leaves the process: StorefrontStub answers requests
through an httpx.MockTransport and records every request it sees, so tests
can assert on both the wire calls and the resulting category store.
"""

import json
from datetime import datetime, timedelta, timezone

import httpx
import pytest

from ziva_admin.categories.store import CategoryStore
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient

STOREFRONT_URL = "http://storefront.test/api"
STOREFRONT_TOKEN = "storefront-admin-token"


# =============================================================================
# Storefront Stub
# =============================================================================


class StorefrontStub:
    """Recording stand-in for the storefront REST API."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._routes: dict[tuple[str, str], httpx.Response | Exception] = {}

    def add(
        self,
        method: str,
        path: str,
        json: dict | list | None = None,
        status_code: int = 200,
    ) -> None:
        """Queue the response returned for ``method path`` (path without the /api prefix)."""
        if json is None:
            response = httpx.Response(status_code)
        else:
            response = httpx.Response(status_code, json=json)
        self._routes[(method.upper(), path)] = response

    def fail(self, method: str, path: str, error: Exception) -> None:
        """Make ``method path`` raise a transport error."""
        self._routes[(method.upper(), path)] = error

    def _handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path.removeprefix("/api")
        outcome = self._routes.get((request.method, path))
        if outcome is None:
            return httpx.Response(404, json={"message": f"No stub for {request.method} {path}"})
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self._handler)

    def client(self, token: str | None = STOREFRONT_TOKEN) -> StorefrontClient:
        return StorefrontClient(STOREFRONT_URL, token, timeout=5.0, transport=self.transport)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> dict:
        return json.loads(self.last_request.content)


@pytest.fixture
def storefront() -> StorefrontStub:
    return StorefrontStub()


# =============================================================================
# Category Payload Factories
# =============================================================================


def make_category(category_id: str, name: str, subtitles: list | None = None, **extra) -> dict:
    """A root category as the storefront serves it."""
    return {
        "_id": category_id,
        "name": name,
        "subtitles": subtitles or [],
        **extra,
    }


def make_subtitle(
    subtitle_id: str, category_id: str, name: str, subtitles: list | None = None, **extra
) -> dict:
    """A subtitle; ``category_id`` is always the owning root category."""
    return {
        "_id": subtitle_id,
        "categoryId": category_id,
        "name": name,
        "subtitles": subtitles or [],
        **extra,
    }


@pytest.fixture
def sample_categories() -> list[dict]:
    """Sarees > Silk > Banarasi, Sarees > Cotton, and a childless Kurtis."""
    return [
        make_category(
            "cat1",
            "Sarees",
            subtitles=[
                make_subtitle(
                    "sub1",
                    "cat1",
                    "Silk",
                    subtitles=[make_subtitle("sub2", "cat1", "Banarasi")],
                ),
                make_subtitle("sub3", "cat1", "Cotton"),
            ],
            description="Handwoven sarees",
            productCount=12,
            status="active",
        ),
        make_category("cat2", "Kurtis", productCount=4, status="inactive"),
    ]


@pytest.fixture
def category_store(sample_categories) -> CategoryStore:
    return CategoryStore.from_payload(sample_categories)


@pytest.fixture
def admin_session(category_store) -> AdminSession:
    """A live admin session holding the sample tree."""
    return AdminSession(
        session_id="test-session-id",
        token=STOREFRONT_TOKEN,
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        store=category_store,
    )

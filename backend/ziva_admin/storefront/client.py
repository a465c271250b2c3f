"""
Storefront REST API client.

The storefront owns all category and product data. Every call carries the
admin's bearer token and opens a short-lived httpx client.
"""

import logging
from typing import Any

import httpx

from ziva_admin.config import get_settings
from ziva_admin.core.errors import StorefrontError

logger = logging.getLogger(__name__)


class StorefrontClient:
    """Thin async wrapper over the storefront's category and product routes"""

    def __init__(
        self,
        base_url: str,
        token: str | None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport

    def _headers(self) -> dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": "ZivaAdmin/1.0 (Category Dashboard)",
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self._headers(),
            transport=self._transport,
        )

    async def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        """Send one request and return the decoded JSON body (None when empty)."""
        async with self._client() as client:
            try:
                response = await client.request(method, path, json=json)
            except httpx.RequestError as e:
                logger.warning(f"Storefront {method} {path} failed: {e}")
                raise StorefrontError(f"Storefront unreachable: {e}") from e

        if response.is_error:
            error = StorefrontError.from_response(response)
            logger.warning(
                f"Storefront {method} {path} returned {response.status_code}: {error.message}"
            )
            raise error

        if not response.content:
            return None
        return response.json()

    async def ping(self) -> bool:
        """Return True when the storefront answers at all, whatever the status."""
        async with self._client() as client:
            try:
                await client.get("/categories")
            except httpx.RequestError as e:
                logger.warning(f"Storefront ping failed: {e}")
                return False
        return True

    # -------------------------------------------------------------------------
    # Categories
    # -------------------------------------------------------------------------

    async def list_categories(self) -> list[dict]:
        data = await self._request("GET", "/categories")
        return data.get("categories") or []

    async def create_category(self, body: dict) -> dict:
        return await self._request("POST", "/categories", json=body)

    async def update_category(self, category_id: str, body: dict) -> dict:
        return await self._request("PUT", f"/categories/{category_id}", json=body)

    async def delete_category(self, category_id: str) -> None:
        await self._request("DELETE", f"/categories/{category_id}")

    # -------------------------------------------------------------------------
    # Subtitles (nested children of a root category)
    # -------------------------------------------------------------------------

    async def add_subtitle(
        self,
        category_id: str,
        subtitle: dict,
        parent_subtitle_id: str | None = None,
    ) -> dict:
        """Insert a subtitle; the response is the owning root category."""
        body: dict[str, Any] = {"categoryId": category_id}
        if parent_subtitle_id:
            body["parentSubtitleId"] = parent_subtitle_id
        body["subtitle"] = subtitle
        return await self._request("POST", "/subtitles/add", json=body)

    async def update_subtitle(
        self, category_id: str, subtitle_id: str, name: str, description: str | None
    ) -> dict:
        return await self._request(
            "PUT",
            "/subtitles/update",
            json={
                "categoryId": category_id,
                "subtitleId": subtitle_id,
                "name": name,
                "description": description,
            },
        )

    async def delete_subtitle(self, category_id: str, subtitle_id: str) -> dict:
        return await self._request(
            "DELETE",
            "/subtitles/delete",
            json={"categoryId": category_id, "subtitleId": subtitle_id},
        )

    # -------------------------------------------------------------------------
    # Products (read only, for dashboard statistics)
    # -------------------------------------------------------------------------

    async def list_products(self) -> list[dict]:
        data = await self._request("GET", "/products")
        return data.get("products") or []


def get_storefront_client(token: str | None) -> StorefrontClient:
    """Build a client for the configured storefront."""
    settings = get_settings()
    return StorefrontClient(
        settings.storefront_base_url,
        token,
        timeout=settings.storefront_timeout,
    )

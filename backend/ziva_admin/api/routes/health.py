import logging
from collections.abc import Callable

from fastapi import APIRouter, Depends

from ziva_admin.storefront.client import StorefrontClient
from ziva_admin.utils.auth import get_client_factory

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("")
async def health_check(
    client_factory: Callable[[str | None], StorefrontClient] = Depends(get_client_factory),
) -> dict[str, str]:
    """Health check endpoint"""
    # Any HTTP answer counts; auth is not needed to be reachable
    reachable = await client_factory(None).ping()
    storefront_status = "reachable" if reachable else "unreachable"
    if not reachable:
        logger.warning("Health check: storefront unreachable")

    return {
        "status": "healthy" if reachable else "unhealthy",
        "storefront": storefront_status,
    }

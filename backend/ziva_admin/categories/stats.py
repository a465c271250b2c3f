import logging

from ziva_admin.core.errors import StorefrontError
from ziva_admin.schemas.category import CategoryStats
from ziva_admin.sessions import AdminSession
from ziva_admin.storefront.client import StorefrontClient

logger = logging.getLogger(__name__)


def compute_stats(session: AdminSession) -> CategoryStats:
    """Dashboard counters for the category screen."""
    return CategoryStats(
        main_categories=len(session.store),
        subcategories=session.store.total_subtitles(),
        products=session.product_count,
    )


async def refresh_product_count(session: AdminSession, client: StorefrontClient) -> int | None:
    """Re-read the product total; the counter is informational, so failures only log."""
    try:
        products = await client.list_products()
    except StorefrontError as e:
        logger.warning(f"Failed to fetch products for dashboard stats: {e.message}")
        return session.product_count

    session.product_count = len(products)
    return session.product_count

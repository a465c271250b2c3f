from ziva_admin.storefront.client import StorefrontClient, get_storefront_client

__all__ = ["StorefrontClient", "get_storefront_client"]

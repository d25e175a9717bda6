"""
Dependency Container

Builds the backend client and the storefront services from settings.
Services never look the client up themselves; it is handed to them here.
"""

import logging
from dataclasses import dataclass

from storefront.config.settings import Settings, get_settings
from storefront.core.logger import configure_logging
from storefront.integrations.apper.http_client import ApperHttpClient
from storefront.services.category_service import CategoryService
from storefront.services.order_service import OrderService
from storefront.services.product_service import ProductService

logger = logging.getLogger(__name__)


@dataclass
class StorefrontServices:
    """The three façades sharing one backend client."""

    orders: OrderService
    products: ProductService
    categories: CategoryService
    client: ApperHttpClient | None = None

    async def close(self) -> None:
        """Release the HTTP client, if one was built."""
        if self.client is not None:
            await self.client.close()


def create_apper_client(settings: Settings) -> ApperHttpClient | None:
    """
    Build the Apper client, or None when credentials are missing.

    A None client is not an error here: the services will report
    "client unavailable" and return empty results.
    """
    if not settings.apper_configured:
        logger.warning("Apper credentials not configured (APPER_PROJECT_ID / APPER_PUBLIC_KEY)")
        return None

    return ApperHttpClient(
        base_url=settings.APPER_API_BASE_URL,
        project_id=settings.APPER_PROJECT_ID,  # type: ignore[arg-type]
        public_key=settings.APPER_PUBLIC_KEY,  # type: ignore[arg-type]
        timeout=settings.APPER_API_TIMEOUT,
    )


def build_services(settings: Settings | None = None, setup_logging: bool = True) -> StorefrontServices:
    """
    Wire settings -> logging -> client -> services.

    Args:
        settings: Settings to use (defaults to get_settings())
        setup_logging: Configure root logging from settings

    Returns:
        StorefrontServices bundle
    """
    settings = settings or get_settings()
    if setup_logging:
        configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

    client = create_apper_client(settings)
    return StorefrontServices(
        orders=OrderService(client),
        products=ProductService(client),
        categories=CategoryService(client),
        client=client,
    )

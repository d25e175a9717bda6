"""
Apper Integration Module.

Concrete client for the hosted Apper records backend.

Usage:
    from storefront.integrations.apper import ApperHttpClient

    async with ApperHttpClient(base_url, project_id, public_key) as client:
        response = await client.fetch_records("product_c", query)
"""

from .exceptions import (
    ApperClientError,
    ApperConnectionError,
    ApperHttpError,
    ApperResponseError,
)
from .http_client import ApperHttpClient
from .models import ApperRecordResult, ApperResponse

__all__ = [
    "ApperHttpClient",
    "ApperResponse",
    "ApperRecordResult",
    "ApperClientError",
    "ApperConnectionError",
    "ApperHttpError",
    "ApperResponseError",
]

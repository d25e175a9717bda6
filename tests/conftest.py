"""
Shared pytest fixtures for all tests.

Provides a mocked records backend client and canned Apper responses.
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest

from storefront.integrations.apper.models import ApperRecordResult, ApperResponse


# ============================================================================
# BACKEND CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def mock_client():
    """Records client whose methods are AsyncMocks returning an empty success."""
    client = AsyncMock()
    empty = ApperResponse(success=True, data=[])
    client.fetch_records.return_value = empty
    client.get_record_by_id.return_value = ApperResponse(success=True, data=None)
    client.create_record.return_value = ApperResponse(success=True, results=[])
    client.update_record.return_value = ApperResponse(success=True, results=[])
    client.delete_record.return_value = ApperResponse(success=True, results=[])
    return client


@pytest.fixture
def rejected_response() -> ApperResponse:
    """Response of a request the backend refused."""
    return ApperResponse(success=False, message="Invalid field in query")


@pytest.fixture
def written_response():
    """Factory for the batch response of a create/update/delete of one record."""

    def _make(record: dict | None = None, success: bool = True, message: str | None = None) -> ApperResponse:
        return ApperResponse(
            success=True,
            results=[ApperRecordResult(success=success, data=record, message=message)],
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 1, 10, 15, 0, tzinfo=UTC)


# ============================================================================
# RAW RECORD FIXTURES
# ============================================================================


@pytest.fixture
def raw_order() -> dict:
    """Order as stored by the backend (JSON columns still encoded)."""
    return {
        "Id": 12,
        "Name": "Order 12",
        "items_c": '[{"name":"Wireless Headphones","quantity":2,"price":129.99}]',
        "total_c": 259.98,
        "delivery_address_c": '{"street":"12 Rustaveli Ave","city":"Tbilisi"}',
        "payment_method_c": "card",
        "status_c": "shipped",
        "order_date_c": "2024-03-01T10:15:00.000Z",
        "estimated_delivery_c": "2024-03-06T10:15:00.000Z",
    }


@pytest.fixture
def raw_product() -> dict:
    return {
        "Id": 3,
        "name_c": "Wireless Headphones",
        "description_c": "Noise-cancelling over-ear headphones",
        "price_c": 129.99,
        "original_price_c": 179.99,
        "category_c": "Electronics",
        "subcategory_c": "Audio",
        "images_c": "https://img.example.com/a.jpg\n\nhttps://img.example.com/b.jpg",
        "rating_c": 4.6,
        "review_count_c": 214,
        "in_stock_c": True,
        "specifications_c": '{"color":"black","battery":"30h"}',
        "brand_c": "SoundMax",
    }


@pytest.fixture
def raw_category() -> dict:
    return {
        "Id": 1,
        "name_c": "Electronics",
        "subcategories_c": "Audio\nPhones\n\nLaptops",
        "icon_c": "Cpu",
    }

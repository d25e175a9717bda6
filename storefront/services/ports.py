"""
Storefront Ports

Interface the services need from a records backend.
Uses Protocol for structural typing.
"""

from typing import Any, Protocol, runtime_checkable

from storefront.integrations.apper.models import ApperResponse


@runtime_checkable
class IRecordClient(Protocol):
    """
    Interface for a records backend client.

    ApperHttpClient implements it; tests pass an AsyncMock.
    """

    async def fetch_records(self, entity: str, query: dict[str, Any]) -> ApperResponse:
        """Fetch records matching a query descriptor"""
        ...

    async def get_record_by_id(self, entity: str, record_id: int, query: dict[str, Any]) -> ApperResponse:
        """Fetch one record by Id"""
        ...

    async def create_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Create records ({"records": [...]})"""
        ...

    async def update_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Update records ({"records": [...]}, each with an Id)"""
        ...

    async def delete_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Delete records ({"RecordIds": [...]})"""
        ...

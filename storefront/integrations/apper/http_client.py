# ============================================================================
# Description: Cliente HTTP para el API de registros de Apper.
#              Una request por operación, sin reintentos.
# ============================================================================
"""
Apper HTTP Client.

Single Responsibility: Execute Apper records API calls over HTTP and parse
the response envelope. Business failures (success=false) are returned to the
caller untouched; only transport problems raise.

Status handling:
- 2xx: parse body as ApperResponse
- any other status: raise ApperHttpError
- timeout / connection failure: raise ApperConnectionError
- body that is not an envelope: raise ApperResponseError
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .exceptions import ApperConnectionError, ApperHttpError, ApperResponseError
from .models import ApperResponse

logger = logging.getLogger(__name__)


class ApperHttpClient:
    """
    HTTP client for the Apper records API.

    Implements the IRecordClient protocol used by the storefront services.
    Uses a persistent AsyncClient for connection reuse; the instance is safe
    to share between concurrent service calls.
    """

    DEFAULT_TIMEOUT = 30.0
    BODY_PREVIEW_CHARS = 200

    def __init__(
        self,
        base_url: str,
        project_id: str,
        public_key: str,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """
        Initialize HTTP client.

        Args:
            base_url: Apper API base URL
            project_id: Apper project identifier
            public_key: Apper public API key
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip("/")
        self.project_id = project_id
        self._public_key = public_key
        self._timeout = timeout
        self._client: httpx.AsyncClient | None = None

    async def initialize(self) -> None:
        """Initialize persistent HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._timeout)

    async def close(self) -> None:
        """Close HTTP client and release resources."""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "ApperHttpClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def _ensure_client(self) -> httpx.AsyncClient:
        """Ensure HTTP client is initialized."""
        if self._client is None:
            await self.initialize()
        return self._client  # type: ignore

    def _get_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._public_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    def _url(self, entity: str, action: str) -> str:
        return f"{self.base_url}/projects/{self.project_id}/records/{entity}/{action}"

    async def fetch_records(self, entity: str, query: dict[str, Any]) -> ApperResponse:
        """
        Fetch records of an entity.

        Args:
            entity: Wire entity name (e.g. "product_c")
            query: Query descriptor (fields, where, whereGroups)

        Returns:
            ApperResponse with `data` holding a list of records
        """
        return await self._post(self._url(entity, "fetch"), query)

    async def get_record_by_id(self, entity: str, record_id: int, query: dict[str, Any]) -> ApperResponse:
        """
        Fetch a single record.

        Returns:
            ApperResponse with `data` holding the record (or null)
        """
        return await self._post(self._url(entity, str(record_id)), query)

    async def create_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Create records; body is {"records": [payload, ...]}."""
        return await self._post(self._url(entity, "create"), body)

    async def update_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Update records; each payload carries its own "Id"."""
        return await self._post(self._url(entity, "update"), body)

    async def delete_record(self, entity: str, body: dict[str, Any]) -> ApperResponse:
        """Delete records; body is {"RecordIds": [id, ...]}."""
        return await self._post(self._url(entity, "delete"), body)

    async def _post(self, url: str, payload: dict[str, Any]) -> ApperResponse:
        """
        POST a JSON payload and parse the Apper envelope.

        Raises:
            ApperConnectionError: On timeout or connection failure
            ApperHttpError: On non-2xx status
            ApperResponseError: On a body that is not an Apper envelope
        """
        client = await self._ensure_client()

        try:
            response = await client.post(url, headers=self._get_headers(), json=payload)
        except httpx.TimeoutException as e:
            raise ApperConnectionError(f"Request timeout after {self._timeout} seconds: {url}") from e
        except httpx.TransportError as e:
            raise ApperConnectionError(f"HTTP transport error: {e}") from e

        logger.debug(f"Apper API response status: {response.status_code} ({url})")

        if not response.is_success:
            error_preview = response.text[: self.BODY_PREVIEW_CHARS] if response.text else "No body"
            raise ApperHttpError(response.status_code, error_preview)

        try:
            return ApperResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise ApperResponseError(f"Failed to parse Apper response: {e}") from e

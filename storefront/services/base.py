"""
Record Service Base

Shared control flow for the storefront façades. Every operation issues one
backend call and never raises: failures are logged and turned into an empty
result ([] for lists, None for single records, False for deletes).
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, ClassVar, Generic, TypeVar

from pydantic import BaseModel

from storefront.core.exceptions import (
    ClientUnavailableError,
    RecordNotFoundError,
    RecordOperationFailedError,
    RequestRejectedError,
    StorefrontError,
)
from storefront.integrations.apper.models import ApperResponse
from storefront.records.queries import RecordQuery, build_list_query

from .ports import IRecordClient

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT")
ResultT = TypeVar("ResultT")
InputT = TypeVar("InputT", bound=BaseModel)


def parse_record_id(record_id: int | str) -> int:
    """Coerce an Id coming from a route or form ("7" -> 7)."""
    if isinstance(record_id, bool):
        raise ValueError(f"Invalid record id: {record_id!r}")
    return int(record_id)


def coerce_input(model: type[InputT], data: BaseModel | Mapping[str, Any]) -> InputT:
    """
    Turn caller input into `model`.

    Accepts an instance of `model`, any other pydantic model (e.g. a draft
    passed where a patch is expected; only the fields it set are carried
    over) or a mapping keyed by wire or attribute names.
    """
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    return model.model_validate(data)


class RecordService(Generic[EntityT]):
    """
    Base class for entity façades.

    Subclasses set `entity` and `fields` and implement `decode`.
    The client is injected; None is allowed and makes every call return
    its empty result.
    """

    entity: ClassVar[str]
    fields: ClassVar[tuple[str, ...]]

    def __init__(self, client: IRecordClient | None):
        """
        Initialize service.

        Args:
            client: Records backend client (None when not configured)
        """
        self.client = client

    def decode(self, raw: Mapping[str, Any]) -> EntityT:
        raise NotImplementedError

    def _require_client(self) -> IRecordClient:
        if self.client is None:
            raise ClientUnavailableError()
        return self.client

    def _ensure_success(self, response: ApperResponse) -> None:
        if not response.success:
            raise RequestRejectedError(self.entity, response.message)

    def _projection(self) -> RecordQuery:
        return build_list_query(self.entity, self.fields)

    async def _guard(self, action: str, empty: ResultT, operation: Callable[[], Awaitable[ResultT]]) -> ResultT:
        """
        Run one operation, converting any failure into `empty`.

        Args:
            action: Description used in log lines (e.g. "fetching orders")
            empty: Value returned on failure
            operation: Coroutine factory doing the actual work
        """
        try:
            return await operation()
        except RecordNotFoundError as e:
            logger.debug(e.message)
            return empty
        except StorefrontError as e:
            logger.error(f"Error {action}: [{e.code}] {e.message}", extra={"extra_data": e.to_dict()})
            return empty
        except Exception as e:
            logger.error(f"Error {action}: {e}", exc_info=True)
            return empty

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def _list(self, query: RecordQuery, action: str) -> list[EntityT]:
        async def operation() -> list[EntityT]:
            client = self._require_client()
            response = await client.fetch_records(query.entity, query.to_wire())
            self._ensure_success(response)
            return [self.decode(raw) for raw in response.records()]

        return await self._guard(action, [], operation)

    async def _get(self, record_id: int | str, action: str) -> EntityT | None:
        async def operation() -> EntityT | None:
            client = self._require_client()
            rid = parse_record_id(record_id)
            response = await client.get_record_by_id(self.entity, rid, self._projection().to_wire())
            self._ensure_success(response)
            if not response.data:
                raise RecordNotFoundError(self.entity, rid)
            return self.decode(response.data)

        return await self._guard(action, None, operation)

    async def _create(self, build_payload: Callable[[], dict[str, Any]], action: str) -> EntityT | None:
        async def operation() -> EntityT | None:
            client = self._require_client()
            payload = build_payload()
            response = await client.create_record(self.entity, {"records": [payload]})
            return self._written_record(response, "create")

        return await self._guard(action, None, operation)

    async def _update(
        self,
        record_id: int | str,
        build_payload: Callable[[int], dict[str, Any]],
        action: str,
    ) -> EntityT | None:
        async def operation() -> EntityT | None:
            client = self._require_client()
            payload = build_payload(parse_record_id(record_id))
            response = await client.update_record(self.entity, {"records": [payload]})
            return self._written_record(response, "update")

        return await self._guard(action, None, operation)

    async def _delete(self, record_id: int | str, action: str) -> bool:
        async def operation() -> bool:
            client = self._require_client()
            rid = parse_record_id(record_id)
            response = await client.delete_record(self.entity, {"RecordIds": [rid]})
            self._ensure_success(response)
            result = response.first_result()
            if result is None or not result.success:
                raise RecordOperationFailedError(self.entity, "delete", result.message if result else None)
            return True

        return await self._guard(action, False, operation)

    def _written_record(self, response: ApperResponse, operation: str) -> EntityT:
        """Decode the record echoed back by a create/update batch of one."""
        self._ensure_success(response)
        result = response.first_result()
        if result is None or not result.success:
            raise RecordOperationFailedError(self.entity, operation, result.message if result else None)
        if not result.data:
            raise RecordOperationFailedError(self.entity, operation, f"{operation} returned no record data")
        return self.decode(result.data)

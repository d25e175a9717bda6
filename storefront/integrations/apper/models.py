# ============================================================================
# Description: Modelos Pydantic para las respuestas del API de Apper.
# ============================================================================
"""
Apper Response Models.

Every Apper records call answers with the same envelope:

- fetch / get-by-id: {success, message?, data}
- create / update / delete: {success, message?, results: [{success, data?, message?}]}

Models:
- ApperRecordResult: per-record outcome of a batch write
- ApperResponse: response envelope
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator


class ApperRecordResult(BaseModel):
    """Outcome of a single record inside a create/update/delete batch."""

    success: bool = False
    data: dict[str, Any] | None = None
    message: str | None = None

    model_config = ConfigDict(extra="allow")


class ApperResponse(BaseModel):
    """
    Apper API response envelope.

    `data` is a list of records for fetch and a single record for
    get-by-id, so it is left untyped here and shaped by the caller.
    """

    success: bool = False
    message: str | None = None
    data: Any = None
    results: list[ApperRecordResult] | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("message", mode="before")
    @classmethod
    def validate_message(cls, v: Any) -> str | None:
        """Backends occasionally send non-string messages."""
        if v is None:
            return None
        return str(v)

    def records(self) -> list[dict[str, Any]]:
        """Return `data` as a list of records (empty when missing)."""
        if not self.data:
            return []
        if isinstance(self.data, list):
            return self.data
        return [self.data]

    def first_result(self) -> ApperRecordResult | None:
        """First per-record result of a batch call, if any."""
        if self.results:
            return self.results[0]
        return None

"""
Storefront Exceptions

Error taxonomy for the data-access layer. Decoders and the record service
raise these internally; the façades catch them at their boundary, log them
and return an empty result instead.
"""

from typing import Any


class StorefrontError(Exception):
    """
    Base exception for all storefront data-access errors.

    Carries a machine-readable code so log lines can be grouped by category.
    """

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize storefront error.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "REQUEST_REJECTED")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary (for structured logs)."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ClientUnavailableError(StorefrontError):
    """Raised when no backend client has been configured."""

    def __init__(self, message: str = "ApperClient not initialized"):
        super().__init__(message, "CLIENT_UNAVAILABLE")


class RequestRejectedError(StorefrontError):
    """Raised when the backend answers with success=false."""

    def __init__(self, entity: str, message: str | None = None):
        self.entity = entity
        super().__init__(
            message or f"Request on {entity} was rejected",
            "REQUEST_REJECTED",
            {"entity": entity},
        )


class RecordNotFoundError(StorefrontError):
    """Raised when a successful response carries no record."""

    def __init__(self, entity: str, record_id: Any):
        self.entity = entity
        self.record_id = record_id
        super().__init__(
            f"{entity} with ID {record_id} not found",
            "RECORD_NOT_FOUND",
            {"entity": entity, "record_id": str(record_id)},
        )


class RecordOperationFailedError(StorefrontError):
    """
    Raised when a batch request succeeds overall but the individual
    record result reports failure (or no result is returned at all).
    """

    def __init__(self, entity: str, operation: str, message: str | None = None):
        self.entity = entity
        self.operation = operation
        super().__init__(
            message or f"Could not {operation} {entity} record",
            "RECORD_OPERATION_FAILED",
            {"entity": entity, "operation": operation},
        )


class DecodeError(StorefrontError):
    """Base class for failures turning a wire record into an entity."""

    def __init__(self, field: str, message: str, code: str = "DECODE_ERROR"):
        self.field = field
        super().__init__(message, code, {"field": field})


class MalformedFieldError(DecodeError):
    """An encoded field does not contain valid JSON."""

    def __init__(self, field: str, reason: str):
        super().__init__(field, f"Field '{field}' is not valid JSON: {reason}", "MALFORMED_FIELD")


class FieldShapeError(DecodeError):
    """A field decoded fine but has the wrong structure."""

    def __init__(self, field: str, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(field, f"Field '{field}' expected {expected}, got {actual}", "FIELD_SHAPE")

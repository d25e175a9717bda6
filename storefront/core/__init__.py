"""
Core building blocks: error taxonomy and logging setup.
"""

from storefront.core.exceptions import (
    ClientUnavailableError,
    DecodeError,
    FieldShapeError,
    MalformedFieldError,
    RecordNotFoundError,
    RecordOperationFailedError,
    RequestRejectedError,
    StorefrontError,
)
from storefront.core.logger import JSONFormatter, configure_logging

__all__ = [
    "StorefrontError",
    "ClientUnavailableError",
    "RequestRejectedError",
    "RecordNotFoundError",
    "RecordOperationFailedError",
    "DecodeError",
    "MalformedFieldError",
    "FieldShapeError",
    "JSONFormatter",
    "configure_logging",
]

"""
Field codecs for the Apper wire format.

The backend stores structured values in plain text columns:
JSON-encoded objects/arrays, and newline-joined string lists.
"""

import json
from collections.abc import Iterable, Mapping
from datetime import UTC, datetime
from typing import Any

from storefront.core.exceptions import FieldShapeError, MalformedFieldError


def decode_json_field(record: Mapping[str, Any], field: str, expected: type[list] | type[dict]) -> Any:
    """
    Decode a JSON-encoded column.

    Args:
        record: Raw record from the backend
        field: Wire field name (e.g. "items_c")
        expected: Container type the field must decode to (list or dict)

    Returns:
        Decoded value, or an empty `expected()` when the field is absent/empty

    Raises:
        MalformedFieldError: The text is not valid JSON
        FieldShapeError: The JSON is valid but not of the expected type
    """
    raw = record.get(field)
    if not raw:
        return expected()

    if isinstance(raw, str):
        try:
            value = json.loads(raw)
        except json.JSONDecodeError as e:
            raise MalformedFieldError(field, str(e)) from e
    else:
        value = raw

    if not isinstance(value, expected):
        raise FieldShapeError(field, expected.__name__, type(value).__name__)
    return value


def encode_json_field(value: Any) -> str:
    """Serialize a structure for a JSON column; strings are sent as-is."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def decode_line_list(value: Any) -> list[str]:
    """Split a newline-joined column, dropping empty entries."""
    if not value:
        return []
    if isinstance(value, str):
        return [line for line in value.split("\n") if line]
    return [item for item in value if item]


def encode_line_list(value: str | Iterable[str]) -> str:
    """Join a list of strings with newlines; strings are sent as-is."""
    if isinstance(value, str):
        return value
    return "\n".join(value)


def format_timestamp(moment: datetime) -> str:
    """
    Format a datetime the way the backend stores it.

    Example: 2024-03-01T10:15:00.000Z
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO-8601 timestamp; returns None when missing or unparseable."""
    if not value or not isinstance(value, str):
        return None
    try:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return moment

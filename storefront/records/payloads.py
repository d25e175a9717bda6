"""
Patch Payload Builder

Builds partial-update payloads field by field. A field that is not added
is not sent, so the backend leaves it unchanged.
"""

from collections.abc import Iterable
from typing import Any

from .codecs import encode_json_field, encode_line_list


class PatchPayload:
    """
    Builder for update payloads with explicit presence rules.

    - scalar(): numbers and booleans, sent whenever not None (0 and False count)
    - text(): strings, sent only when non-empty
    - json(): structures for JSON columns, sent unless None or ""
    - lines(): string lists for newline columns, sent unless None or ""

    Example:
        ```python
        payload = (
            PatchPayload(record_id=7)
            .scalar("total_c", 0)
            .text("status_c", None)
            .build()
        )
        # {"Id": 7, "total_c": 0}
        ```
    """

    def __init__(self, record_id: int):
        self._payload: dict[str, Any] = {"Id": record_id}

    def scalar(self, field: str, value: Any) -> "PatchPayload":
        if value is not None:
            self._payload[field] = value
        return self

    def text(self, field: str, value: str | None) -> "PatchPayload":
        if value:
            self._payload[field] = value
        return self

    def json(self, field: str, value: Any) -> "PatchPayload":
        # "" would overwrite the column with text that is not JSON
        if value is not None and value != "":
            self._payload[field] = encode_json_field(value)
        return self

    def lines(self, field: str, value: str | Iterable[str] | None) -> "PatchPayload":
        if value is not None and value != "":
            self._payload[field] = encode_line_list(value)
        return self

    def build(self) -> dict[str, Any]:
        return dict(self._payload)

"""
Record layer: query construction and wire <-> entity normalization.
"""

from .normalizer import (
    decode_category,
    decode_order,
    decode_product,
    encode_order_create,
    encode_order_update,
    encode_product_create,
    encode_product_update,
)
from .payloads import PatchPayload
from .queries import (
    SEARCH_FIELDS,
    ConditionOperator,
    GroupOperator,
    RecordQuery,
    build_filter_query,
    build_list_query,
    build_search_query,
)

__all__ = [
    "decode_order",
    "decode_product",
    "decode_category",
    "encode_order_create",
    "encode_order_update",
    "encode_product_create",
    "encode_product_update",
    "PatchPayload",
    "RecordQuery",
    "ConditionOperator",
    "GroupOperator",
    "SEARCH_FIELDS",
    "build_list_query",
    "build_filter_query",
    "build_search_query",
]

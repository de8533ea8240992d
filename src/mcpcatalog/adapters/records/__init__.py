"""Record payload schema and translation shared by every loader."""

from .schema import ProductsResponse, RecordPayload
from .translator import entity_to_record, kind_from_type, parse_records, payload_to_entity

__all__ = [
    "ProductsResponse",
    "RecordPayload",
    "entity_to_record",
    "kind_from_type",
    "parse_records",
    "payload_to_entity",
]

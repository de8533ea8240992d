"""Key/value store adapters holding locally edited records."""

from __future__ import annotations

from .memory import InMemoryKeyValueStore
from .sqlalchemy import SqlAlchemyKeyValueStore, catalog_kv_table

__all__ = [
    "InMemoryKeyValueStore",
    "SqlAlchemyKeyValueStore",
    "catalog_kv_table",
]

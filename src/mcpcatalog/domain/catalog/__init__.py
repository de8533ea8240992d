"""Unified catalog: merge stage and the owned snapshot store."""

from __future__ import annotations

from .merge import entity_key, merge_sources
from .store import Catalog, CatalogListener, CatalogStore, CatalogUpdated

__all__ = [
    "Catalog",
    "CatalogListener",
    "CatalogStore",
    "CatalogUpdated",
    "entity_key",
    "merge_sources",
]

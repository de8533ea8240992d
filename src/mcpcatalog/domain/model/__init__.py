"""Public domain model surface."""

from __future__ import annotations

from .entity import CatalogEntity, CategoryEntity, InvalidEntityError
from .enums import LISTED_KINDS, EntityKind, Environment, KindHint, Origin

__all__ = [
    "LISTED_KINDS",
    "CatalogEntity",
    "CategoryEntity",
    "EntityKind",
    "Environment",
    "InvalidEntityError",
    "KindHint",
    "Origin",
]

"""
Catalog records:
listed entities (servers, clients, agents) and derived categories.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from .enums import EntityKind, Origin

if TYPE_CHECKING:
    from collections.abc import Mapping


class InvalidEntityError(ValueError):
    """Raised when a record would violate the non-empty id/name invariant."""


def _empty_extra() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True, kw_only=True)
class CatalogEntity:
    """One listed catalog record.

    ``kind`` is assigned by the loader that produced the record and is never
    inferred afterwards. ``category_slug`` stays ``None`` until the merger
    has seen the record.
    """

    id: str
    kind: EntityKind
    name: str
    category: str | None = None
    category_slug: str | None = None
    description: str | None = None
    short_description: str | None = None
    long_description: str | None = None
    key_features: tuple[str, ...] = ()
    use_cases: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    stars: float = 0
    official: bool = False
    image_path: str | None = None
    origin: Origin = Origin.FIXTURES
    synthesized: bool = False
    extra: Mapping[str, object] = field(default_factory=_empty_extra, compare=False)

    def __post_init__(self) -> None:
        if not self.id.strip():
            raise InvalidEntityError(f"{self.kind} record has an empty id (name={self.name!r})")
        if not self.name.strip():
            raise InvalidEntityError(f"{self.kind} record {self.id!r} has an empty name")
        if self.kind is EntityKind.CATEGORY:
            raise InvalidEntityError("category records are derived; use CategoryEntity")

    def with_kind(self, kind: EntityKind, *, entity_id: str | None = None) -> CatalogEntity:
        return dataclasses.replace(self, kind=kind, id=entity_id or self.id)

    def with_category_slug(self, slug: str) -> CatalogEntity:
        return dataclasses.replace(self, category_slug=slug)


@dataclass(frozen=True, slots=True, kw_only=True)
class CategoryEntity:
    """Synthetic entity derived from the distinct category values of a merge."""

    slug: str
    name: str
    count: int
    original_forms: frozenset[str]
    kind: EntityKind = EntityKind.CATEGORY

    @property
    def id(self) -> str:
        return self.slug

    @property
    def description(self) -> str:
        return f"Collection of {self.name} items"

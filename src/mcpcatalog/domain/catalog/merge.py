"""Merge per-source record collections into one unified catalog.

Responsibilities of this stage:
- concatenate sources in priority order (first source = highest priority)
- collapse records sharing ``(kind, normalized id)``; the first one seen wins
  wholesale, fields are never combined across sources
- derive one ``CategoryEntity`` per distinct category slug

Every call rebuilds the catalog in full; nothing is updated incrementally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TypeAlias

from mcpcatalog.domain.identifiers import UNCATEGORIZED, category_slug, normalize
from mcpcatalog.domain.model import CategoryEntity

from .store import Catalog

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from mcpcatalog.domain.model import CatalogEntity, EntityKind

log = logging.getLogger(__name__)

EntityKey: TypeAlias = "tuple[EntityKind, str]"


def entity_key(entity: CatalogEntity) -> EntityKey:
    return (entity.kind, normalize(entity.id))


@dataclass(slots=True)
class _CategoryTally:
    name: str
    count: int = 0
    original_forms: set[str] = field(default_factory=set[str])

    def observe(self, raw: str) -> None:
        self.count += 1
        self.original_forms.add(raw)

    def freeze(self, slug: str) -> CategoryEntity:
        return CategoryEntity(
            slug=slug,
            name=self.name,
            count=self.count,
            original_forms=frozenset(self.original_forms),
        )


def merge_sources(sources: Sequence[Iterable[CatalogEntity]]) -> Catalog:
    """Build a new catalog snapshot from ``sources`` (highest priority first)."""

    deduplicated = _deduplicate(sources)
    tallies: dict[str, _CategoryTally] = {}
    entities: list[CatalogEntity] = []
    for entity in deduplicated:
        raw_category = (entity.category or "").strip() or UNCATEGORIZED
        slug = category_slug(raw_category)
        tally = tallies.get(slug)
        if tally is None:
            tally = tallies[slug] = _CategoryTally(name=raw_category)
        tally.observe(raw_category)
        entities.append(entity.with_category_slug(slug))

    categories = tuple(tally.freeze(slug) for slug, tally in tallies.items())
    log.debug(
        "Merged %s sources into %s entities and %s categories",
        len(sources),
        len(entities),
        len(categories),
    )
    return Catalog(entities=tuple(entities), categories=categories)


def _deduplicate(sources: Sequence[Iterable[CatalogEntity]]) -> list[CatalogEntity]:
    seen: set[EntityKey] = set()
    kept: list[CatalogEntity] = []
    for priority, records in enumerate(sources):
        for record in records:
            key = entity_key(record)
            if key in seen:
                log.debug(
                    "Dropping %s %r from source #%s: shadowed by a higher-priority source",
                    record.kind,
                    record.id,
                    priority,
                )
                continue
            seen.add(key)
            kept.append(record)
    return kept

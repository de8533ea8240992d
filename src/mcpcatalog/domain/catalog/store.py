"""Process-wide holder of the unified catalog snapshot.

The store is the single writer of catalog state. Readers keep whatever
``Catalog`` reference they obtained; ``replace`` swaps the reference in one
assignment and only then notifies subscribers, so a subscriber (the resolution
cache) never observes the previous snapshot after being told about the new one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING, TypeAlias

from mcpcatalog.domain.model import LISTED_KINDS, Origin

if TYPE_CHECKING:
    from collections.abc import Iterator

    from mcpcatalog.domain.model import CatalogEntity, CategoryEntity, EntityKind

log = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class Catalog:
    """Immutable snapshot: listed entities in catalog order, then categories."""

    entities: tuple[CatalogEntity, ...] = ()
    categories: tuple[CategoryEntity, ...] = ()
    built_at: datetime = field(default_factory=_utcnow)

    def __len__(self) -> int:
        return len(self.entities) + len(self.categories)

    def __iter__(self) -> Iterator[CatalogEntity | CategoryEntity]:
        yield from self.entities
        yield from self.categories

    def of_kind(self, kind: EntityKind) -> tuple[CatalogEntity, ...]:
        return tuple(entity for entity in self.entities if entity.kind is kind)

    def category(self, slug: str) -> CategoryEntity | None:
        for category in self.categories:
            if category.slug == slug:
                return category
        return None

    def counts(self) -> dict[str, int]:
        counts = {str(kind): len(self.of_kind(kind)) for kind in LISTED_KINDS}
        counts["category"] = len(self.categories)
        return counts


@dataclass(frozen=True, slots=True)
class CatalogUpdated:
    """Published after every ``CatalogStore.replace``."""

    timestamp: datetime
    entity_count: int
    category_count: int


CatalogListener: TypeAlias = "Callable[[CatalogUpdated], None]"


class CatalogStore:
    """Owns the current ``Catalog`` and the listeners interested in replacements."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self._catalog = catalog or Catalog()
        self._listeners: list[CatalogListener] = []

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    @property
    def is_empty(self) -> bool:
        return not self._catalog.entities

    def subscribe(self, listener: CatalogListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unsubscribes it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def replace(self, catalog: Catalog) -> CatalogUpdated:
        self._catalog = catalog
        event = CatalogUpdated(
            timestamp=catalog.built_at,
            entity_count=len(catalog.entities),
            category_count=len(catalog.categories),
        )
        log.info(
            "Catalog replaced: entities=%s, categories=%s",
            event.entity_count,
            event.category_count,
        )
        for listener in tuple(self._listeners):
            listener(event)
        return event

    def append_placeholder(self, entity: CatalogEntity, *, max_retained: int) -> None:
        """Add a resolver placeholder without publishing an update.

        At most ``max_retained`` resolver-built entities are kept; the oldest are
        evicted first. The next ``replace`` drops all of them.
        """

        entities = [*self._catalog.entities, entity]
        placeholders = [
            index for index, item in enumerate(entities) if item.origin is Origin.RESOLVER
        ]
        overflow = len(placeholders) - max_retained
        if overflow > 0:
            evicted = set(placeholders[:overflow])
            entities = [item for index, item in enumerate(entities) if index not in evicted]
            log.debug("Evicted %s resolver placeholders", overflow)
        self._catalog = Catalog(
            entities=tuple(entities),
            categories=self._catalog.categories,
            built_at=self._catalog.built_at,
        )

"""Pure matching strategies of the resolution cascade.

Each strategy takes the lookup key and the candidate entities (already filtered
by kind) and returns the first matching entity in catalog order, or ``None``.
Strategies never consult the cache or mutate anything.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, TypeAlias

from mcpcatalog.domain.identifiers import compact, normalize, title_from_slug
from mcpcatalog.domain.model import CatalogEntity, EntityKind, Origin

from .contracts import PREFIX_MIN_LENGTH, LookupKey, MatchStrategy

if TYPE_CHECKING:
    from collections.abc import Iterable

log = logging.getLogger(__name__)

Strategy: TypeAlias = "Callable[[LookupKey, Sequence[CatalogEntity]], CatalogEntity | None]"

UNKNOWN_ID = "unknown"
UNKNOWN_NAME = "Unknown"


def _first(
    candidates: Iterable[CatalogEntity],
    predicate: Callable[[CatalogEntity], bool],
) -> CatalogEntity | None:
    return next((entity for entity in candidates if predicate(entity)), None)


def match_exact_id(key: LookupKey, candidates: Sequence[CatalogEntity]) -> CatalogEntity | None:
    if not key.normalized:
        return None
    return _first(candidates, lambda entity: normalize(entity.id) == key.normalized)


def match_name_as_slug(
    key: LookupKey,
    candidates: Sequence[CatalogEntity],
) -> CatalogEntity | None:
    if not key.normalized:
        return None
    spaced = key.spaced.casefold()
    return _first(candidates, lambda entity: entity.name.strip().casefold() == spaced)


def match_compact_name(
    key: LookupKey,
    candidates: Sequence[CatalogEntity],
) -> CatalogEntity | None:
    target = key.compact
    if not target:
        return None
    return _first(candidates, lambda entity: compact(entity.name) == target)


def match_prefix(key: LookupKey, candidates: Sequence[CatalogEntity]) -> CatalogEntity | None:
    if len(key.normalized) < PREFIX_MIN_LENGTH:
        return None
    return _first(candidates, lambda entity: normalize(entity.name).startswith(key.normalized))


def match_partial_word(
    key: LookupKey,
    candidates: Sequence[CatalogEntity],
) -> CatalogEntity | None:
    for word in key.words:
        match = _first(candidates, lambda entity, word=word: word in entity.name.casefold())
        if match is not None:
            return match
    return None


NAME_STRATEGIES: tuple[tuple[MatchStrategy, Strategy], ...] = (
    (MatchStrategy.EXACT_ID, match_exact_id),
    (MatchStrategy.NAME_AS_SLUG, match_name_as_slug),
    (MatchStrategy.COMPACT_NAME, match_compact_name),
    (MatchStrategy.PREFIX, match_prefix),
)


def run_strategies(
    key: LookupKey,
    candidates: Sequence[CatalogEntity],
    strategies: Sequence[tuple[MatchStrategy, Strategy]] = NAME_STRATEGIES,
) -> tuple[MatchStrategy, CatalogEntity] | None:
    for tag, strategy in strategies:
        entity = strategy(key, candidates)
        if entity is not None:
            log.debug("Resolved %r via %s -> %s", key.raw, tag, entity.id)
            return tag, entity
    return None


_PLACEHOLDER_LABELS: dict[EntityKind, tuple[str, str]] = {
    EntityKind.SERVER: ("MCP server", "MCP Servers"),
    EntityKind.CLIENT: ("MCP client", "MCP Clients"),
    EntityKind.AGENT: ("AI agent", "AI Agents"),
}


def synthesize(key: LookupKey) -> CatalogEntity:
    """Placeholder entity for a key that matched nothing."""

    kind = key.kind_hint.kind or EntityKind.SERVER
    slug = key.normalized or UNKNOWN_ID
    entity_id = normalize(slug, with_prefix=True) if kind is EntityKind.CLIENT else slug
    name = title_from_slug(key.normalized) if key.normalized else UNKNOWN_NAME
    label, category = _PLACEHOLDER_LABELS[kind]
    description = f"Information about this {label} is currently unavailable."
    image = (
        "/assets/client-images/desktop-application.png"
        if kind is EntityKind.CLIENT
        else "/assets/news-images/fallback.jpg"
    )
    return CatalogEntity(
        id=entity_id,
        kind=kind,
        name=name,
        category=category,
        description=description,
        short_description=description,
        image_path=image,
        origin=Origin.RESOLVER,
        synthesized=True,
    )

"""Translate record payloads into catalog entities and back."""

from __future__ import annotations

from logging import getLogger
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from mcpcatalog.domain.identifiers import normalize
from mcpcatalog.domain.model import CatalogEntity, EntityKind, InvalidEntityError

from .schema import RecordPayload

if TYPE_CHECKING:
    from collections.abc import Iterable

    from mcpcatalog.domain.model import Origin

log = getLogger(__name__)

DEFAULT_CATEGORY: Final[str] = "General"
MISSING_DESCRIPTION: Final[str] = "No description available."
SHORT_DESCRIPTION_LIMIT: Final[int] = 150

_CLIENT_TYPES: Final[frozenset[str]] = frozenset({"client", "mcp_client", "mcp-client"})
_AGENT_TYPES: Final[frozenset[str]] = frozenset({"ai_agent", "ai-agent", "agent"})


def kind_from_type(value: str | None) -> EntityKind:
    """Map a remote ``type``/``product_type`` to a kind; anything unknown is a server."""

    tag = (value or "").strip().lower()
    if tag in _CLIENT_TYPES:
        return EntityKind.CLIENT
    if tag in _AGENT_TYPES:
        return EntityKind.AGENT
    return EntityKind.SERVER


def shorten(description: str | None) -> str:
    if not description:
        return MISSING_DESCRIPTION
    if len(description) <= SHORT_DESCRIPTION_LIMIT:
        return description
    return f"{description[:SHORT_DESCRIPTION_LIMIT]}..."


def entity_id(payload: RecordPayload, kind: EntityKind) -> str:
    raw = payload.id or normalize(payload.name)
    if kind is EntityKind.CLIENT:
        return normalize(raw, with_prefix=True)
    return raw


def payload_to_entity(
    payload: RecordPayload,
    *,
    kind: EntityKind,
    origin: Origin,
    backfill: bool = False,
) -> CatalogEntity:
    """Build an entity; ``backfill`` fills the display defaults of bundled records."""

    category = payload.tag_on_card or payload.category
    short_description = payload.short_description
    long_description = payload.long_description
    keywords = tuple(payload.keywords)
    if backfill:
        category = category or DEFAULT_CATEGORY
        short_description = short_description or shorten(payload.description)
        long_description = long_description or payload.description
        keywords = keywords or tuple(payload.name.lower().split())

    extra: dict[str, object] = dict(payload.model_extra or {})
    if payload.github_url:
        extra["github_url"] = payload.github_url
    if payload.installation_command:
        extra["installation_command"] = payload.installation_command

    return CatalogEntity(
        id=entity_id(payload, kind),
        kind=kind,
        name=payload.name,
        category=category,
        description=payload.description,
        short_description=short_description,
        long_description=long_description,
        key_features=tuple(payload.key_features),
        use_cases=tuple(payload.use_cases),
        tags=tuple(payload.tags),
        keywords=keywords,
        stars=payload.star_count,
        official=payload.official,
        image_path=payload.image_path,
        origin=origin,
        extra=MappingProxyType(extra),
    )


def parse_records(
    items: Iterable[object],
    *,
    origin: Origin,
    kind: EntityKind | None = None,
    backfill: bool = False,
) -> tuple[CatalogEntity, ...]:
    """Validate each item; invalid ones are dropped with a warning.

    ``kind=None`` derives the kind from each record's type field.
    """

    entities: list[CatalogEntity] = []
    for index, item in enumerate(items):
        try:
            payload = RecordPayload.model_validate(item)
            entity = payload_to_entity(
                payload,
                kind=kind or kind_from_type(payload.type),
                origin=origin,
                backfill=backfill,
            )
        except (ValidationError, InvalidEntityError) as exc:
            log.warning("Skipping invalid %s record #%s: %s", origin, index, exc)
            continue
        entities.append(entity)
    return tuple(entities)


def entity_to_record(entity: CatalogEntity) -> dict[str, object]:
    """JSON-ready record in the shape the local edit arrays are stored in."""

    record: dict[str, object] = {
        "id": entity.id,
        "name": entity.name,
        "type": str(entity.kind),
        "category": entity.category,
        "description": entity.description,
        "shortDescription": entity.short_description,
        "longDescription": entity.long_description,
        "keyFeatures": list(entity.key_features),
        "useCases": list(entity.use_cases),
        "tags": list(entity.tags),
        "keywords": list(entity.keywords),
        "stars": entity.stars,
        "official": entity.official,
        "imagePath": entity.image_path,
    }
    record.update(entity.extra)
    return {key: value for key, value in record.items() if value is not None}

"""Well-known client slugs and the entities built for them."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Final

from mcpcatalog.domain.identifiers import normalize
from mcpcatalog.domain.model import CatalogEntity, EntityKind, Origin

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

log = logging.getLogger(__name__)

CLIENT_ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "claude-desktop": "Claude Desktop",
        "vscode-mcp-extension": "VSCode MCP Extension",
        "cursor": "Cursor",
        "librechat": "LibreChat",
        "zed": "Zed",
        "eechat": "eechat",
        "5ire": "5ire",
        "cherry-studio": "Cherry Studio",
    }
)

_EDITOR_CLIENTS: Final[frozenset[str]] = frozenset({"cursor", "zed", "vscode-mcp-extension"})
KNOWN_CLIENT_CATEGORY: Final[str] = "MCP Clients"


def canonical_name(slug: str, aliases: Mapping[str, str] = CLIENT_ALIASES) -> str | None:
    return aliases.get(normalize(slug))


def find_by_canonical_name(
    name: str,
    candidates: Sequence[CatalogEntity],
) -> CatalogEntity | None:
    """Exact name, then case-insensitive name, then substring of the name."""

    for entity in candidates:
        if entity.name == name:
            return entity
    folded = name.casefold()
    for entity in candidates:
        if entity.name.casefold() == folded:
            return entity
    for entity in candidates:
        if folded in entity.name.casefold():
            return entity
    return None


def known_client(slug: str, name: str) -> CatalogEntity:
    """Entity for an aliased client that the catalog does not list."""

    slug = normalize(slug)
    image = "code-editor" if slug in _EDITOR_CLIENTS else "desktop-application"
    log.debug("Building known-client entity for %r", slug)
    return CatalogEntity(
        id=normalize(slug, with_prefix=True),
        kind=EntityKind.CLIENT,
        name=name,
        category=KNOWN_CLIENT_CATEGORY,
        description=f"Official MCP client for {name}.",
        short_description=f"Official MCP client for {name}.",
        keywords=tuple(name.lower().split()),
        official=True,
        image_path=f"/assets/client-images/{image}.png",
        origin=Origin.RESOLVER,
    )

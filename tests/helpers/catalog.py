"""Reusable fakes and builders for catalog tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import httpx

from mcpcatalog.adapters.http_resilience import ResilienceConfig, ResilientClient
from mcpcatalog.domain.model import CatalogEntity, EntityKind, Origin
from mcpcatalog.domain.ports import SourceLoader, SourceLoadResult

if TYPE_CHECKING:
    from collections.abc import Callable


def make_entity(
    entity_id: str,
    name: str | None = None,
    *,
    kind: EntityKind = EntityKind.SERVER,
    category: str | None = "Developer Tools",
    origin: Origin = Origin.FIXTURES,
    **fields: object,
) -> CatalogEntity:
    return CatalogEntity(
        id=entity_id,
        kind=kind,
        name=name or entity_id.replace("-", " ").title(),
        category=category,
        origin=origin,
        **fields,  # type: ignore[arg-type]
    )


@dataclass
class StaticLoader:
    """Loader returning a fixed result and counting calls."""

    result: SourceLoadResult
    calls: int = field(default=0)

    def __call__(self) -> SourceLoadResult:
        self.calls += 1
        return self.result

    @classmethod
    def of(cls, origin: Origin, *records: CatalogEntity) -> StaticLoader:
        return cls(SourceLoadResult(origin=origin, records=records))

    @classmethod
    def failing(cls, origin: Origin, reason: str = "offline") -> StaticLoader:
        return cls(SourceLoadResult.unavailable(origin, reason))


def make_client_factory(
    handler: Callable[[httpx.Request], httpx.Response],
) -> Callable[[ResilienceConfig], ResilientClient]:
    async def async_handler(request: httpx.Request) -> httpx.Response:
        return handler(request)

    def factory(resilience: ResilienceConfig) -> ResilientClient:
        return ResilientClient(resilience, transport=httpx.MockTransport(async_handler))

    return factory


if TYPE_CHECKING:
    _loader_check: SourceLoader = StaticLoader.of(Origin.FIXTURES)

"""Application orchestration entry points."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from logging import getLogger
from typing import TYPE_CHECKING

from mcpcatalog.adapters.catalog_api import RemoteCatalogLoader
from mcpcatalog.adapters.fixtures import FixtureLoader
from mcpcatalog.adapters.http_resilience import ResilienceConfig, ResilientClient
from mcpcatalog.adapters.kv_store import SqlAlchemyKeyValueStore
from mcpcatalog.adapters.local_cache import LocalCacheLoader, LocalCacheWriter
from mcpcatalog.config import CatalogConfig, get_catalog_config, get_store_config
from mcpcatalog.domain.catalog import CatalogStore, merge_sources
from mcpcatalog.domain.model import LISTED_KINDS, EntityKind, Environment, KindHint
from mcpcatalog.domain.resolution import EntityResolver, SynthesisPolicy

if TYPE_CHECKING:
    from mcpcatalog.domain.catalog import Catalog, CatalogUpdated
    from mcpcatalog.domain.model import CatalogEntity
    from mcpcatalog.domain.ports import KeyValueStore, RawRecords, SourceLoader, SourceLoadResult
    from mcpcatalog.domain.resolution import ResolutionOutcome

ClientFactory = Callable[[ResilienceConfig], ResilientClient]

log = getLogger(__name__)


def _listed_kind(kind: EntityKind | str) -> EntityKind:
    resolved = EntityKind(kind)
    if resolved not in LISTED_KINDS:
        msg = f"{resolved} records are derived and cannot be edited"
        raise ValueError(msg)
    return resolved


class CatalogService:
    """Loads every source, owns the merged catalog and answers lookups.

    Source priority: local edits (servers, clients, agents), then the remote API.
    The bundled records are read only when the remote API is unavailable.
    """

    def __init__(
        self,
        *,
        kv_store: KeyValueStore,
        remote: SourceLoader,
        fixtures: SourceLoader,
        environment: Environment = Environment.PRODUCTION,
        policy: SynthesisPolicy | None = None,
        catalog_store: CatalogStore | None = None,
        owns_kv_store: bool = False,
    ) -> None:
        self.environment = environment
        self.kv_store = kv_store
        self._owns_kv_store = owns_kv_store
        self.local = LocalCacheLoader(store=kv_store, environment=environment)
        self.writer = LocalCacheWriter(store=kv_store, environment=environment)
        self.remote = remote
        self.fixtures = fixtures
        self.store = catalog_store or CatalogStore()
        self.resolver = EntityResolver(self.store, policy=policy)
        self._local_records: dict[EntityKind, RawRecords] = {}
        self._upstream: SourceLoadResult | None = None

    @property
    def catalog(self) -> Catalog:
        return self.store.catalog

    def close(self) -> None:
        """Detach the resolver and dispose a key/value store built for this service."""

        self.resolver.close()
        if self._owns_kv_store and isinstance(self.kv_store, SqlAlchemyKeyValueStore):
            self.kv_store.dispose()

    def refresh(self) -> CatalogUpdated:
        """Reload every source and replace the catalog."""

        self._local_records = {kind: self.local.load_kind(kind) for kind in LISTED_KINDS}
        self._upstream = self._load_upstream()
        log.info(
            "Refreshing catalog: local=%s, upstream=%s (%s)",
            sum(len(records) for records in self._local_records.values()),
            len(self._upstream.records),
            self._upstream.origin,
        )
        return self._publish()

    def resolve(
        self,
        raw_key: str | None,
        kind_hint: KindHint | str | None = KindHint.UNKNOWN,
    ) -> ResolutionOutcome:
        if self._upstream is None:
            self.refresh()
        return self.resolver.resolve(raw_key, kind_hint)

    def notify_entity_changed(self, kind: EntityKind | str) -> CatalogUpdated:
        """Re-read the local records of ``kind`` and rebuild the catalog."""

        changed = _listed_kind(kind)
        if self._upstream is None:
            return self.refresh()
        self._local_records[changed] = self.local.load_kind(changed)
        log.info("Local %s records changed; rebuilding catalog", changed)
        return self._publish()

    def upsert_entity(self, kind: EntityKind | str, record: Mapping[str, object]) -> CatalogEntity:
        edited = _listed_kind(kind)
        entity = self.writer.upsert(edited, record)
        self.notify_entity_changed(edited)
        return entity

    def delete_entity(self, kind: EntityKind | str, entity_id: str) -> bool:
        edited = _listed_kind(kind)
        removed = self.writer.delete(edited, entity_id)
        if not removed:
            log.info("No local %s record %r to delete", edited, entity_id)
            return False
        self.notify_entity_changed(edited)
        return True

    def _load_upstream(self) -> SourceLoadResult:
        remote = self.remote()
        if remote.ok:
            return remote
        log.info("Using bundled records: %s", remote.failure)
        return self.fixtures()

    def _publish(self) -> CatalogUpdated:
        upstream = self._upstream.records if self._upstream is not None else ()
        sources = [*(self._local_records.get(kind, ()) for kind in LISTED_KINDS), upstream]
        return self.store.replace(merge_sources(sources))


def build_catalog_service(
    config: CatalogConfig | None = None,
    *,
    kv_store: KeyValueStore | None = None,
    client_factory: ClientFactory | None = None,
) -> CatalogService:
    """Wire the configured key/value store and loaders into a ``CatalogService``."""

    effective_config = config or get_catalog_config()
    effective_store = kv_store or SqlAlchemyKeyValueStore(
        uri=get_store_config(storage=effective_config.storage).uri
    )
    remote = (
        RemoteCatalogLoader(config=effective_config.api, client_factory=client_factory)
        if client_factory is not None
        else RemoteCatalogLoader(config=effective_config.api)
    )
    log.info(
        "Building catalog service: environment=%s, api=%s",
        effective_config.environment,
        effective_config.api.base_url,
    )
    return CatalogService(
        kv_store=effective_store,
        remote=remote,
        fixtures=FixtureLoader(),
        environment=effective_config.environment,
        policy=effective_config.synthesis,
        owns_kv_store=kv_store is None,
    )

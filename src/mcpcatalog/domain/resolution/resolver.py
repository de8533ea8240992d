"""Resolve an untrusted route segment to exactly one catalog entity.

Cascade (first hit wins):

1. cached outcome for ``(kind hint, normalized key)``
2. exact id, name-as-slug, compact name, prefix (kind-filtered candidates)
3. alias table for well-known clients (client hint only)
4. misclassified-kind rescue: step 2 over non-client catalog records, re-prefixed
   as clients (client hint only; resolver placeholders are skipped)
5. partial word match
6. synthesized placeholder

``resolve`` never raises; a key matching nothing yields a placeholder flagged
``synthesized``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from mcpcatalog.domain.identifiers import normalize
from mcpcatalog.domain.model import EntityKind, KindHint, Origin

from .aliases import CLIENT_ALIASES, canonical_name, find_by_canonical_name, known_client
from .cache import ResolutionCache
from .contracts import LookupKey, MatchStrategy, ResolutionOutcome, SynthesisPolicy
from .strategies import NAME_STRATEGIES, match_partial_word, run_strategies, synthesize

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mcpcatalog.domain.catalog import Catalog, CatalogStore
    from mcpcatalog.domain.model import CatalogEntity

    from .strategies import Strategy

log = logging.getLogger(__name__)


def coerce_hint(kind_hint: KindHint | str | None) -> KindHint:
    if isinstance(kind_hint, KindHint):
        return kind_hint
    try:
        return KindHint((kind_hint or KindHint.UNKNOWN).strip().lower())
    except ValueError:
        log.warning("Unknown kind hint %r; searching every kind", kind_hint)
        return KindHint.UNKNOWN


def _candidates(catalog: Catalog, hint: KindHint) -> tuple[CatalogEntity, ...]:
    kind = hint.kind
    if kind is None:
        return catalog.entities
    return catalog.of_kind(kind)


class EntityResolver:
    """Cascade over the store's current snapshot, memoized in a ``ResolutionCache``."""

    def __init__(
        self,
        store: CatalogStore,
        *,
        cache: ResolutionCache | None = None,
        policy: SynthesisPolicy | None = None,
        aliases: Mapping[str, str] = CLIENT_ALIASES,
        strategies: Sequence[tuple[MatchStrategy, Strategy]] = NAME_STRATEGIES,
    ) -> None:
        self._store = store
        self.cache = cache or ResolutionCache()
        self.policy = policy or SynthesisPolicy()
        self._aliases = aliases
        self._strategies = tuple(strategies)
        self._unsubscribe = store.subscribe(self.cache.on_catalog_updated)

    def close(self) -> None:
        self._unsubscribe()

    def resolve(
        self,
        raw_key: str | None,
        kind_hint: KindHint | str | None = KindHint.UNKNOWN,
    ) -> ResolutionOutcome:
        key = LookupKey.from_raw(raw_key, coerce_hint(kind_hint))
        cached = self.cache.get(key.cache_key)
        if cached is not None:
            log.debug("Resolved %r from cache -> %s", key.raw, cached.entity.id)
            return cached.as_cached()

        outcome = self._cascade(key, self._store.catalog)
        self.cache.put(key.cache_key, outcome)
        if outcome.entity.origin is Origin.RESOLVER and self.policy.retain:
            self._store.append_placeholder(outcome.entity, max_retained=self.policy.max_retained)
        return outcome

    def _cascade(self, key: LookupKey, catalog: Catalog) -> ResolutionOutcome:
        candidates = _candidates(catalog, key.kind_hint)
        hit = run_strategies(key, candidates, self._strategies)
        if hit is not None:
            strategy, entity = hit
            return ResolutionOutcome(entity=entity, strategy=strategy)

        if key.kind_hint is KindHint.CLIENT:
            outcome = self._client_rescue(key, catalog, candidates)
            if outcome is not None:
                return outcome

        partial = match_partial_word(key, candidates)
        if partial is not None:
            log.debug("Resolved %r via partial word -> %s", key.raw, partial.id)
            return ResolutionOutcome(entity=partial, strategy=MatchStrategy.PARTIAL_WORD)

        log.info("No catalog entity for %r (%s); synthesizing", key.raw, key.kind_hint)
        return ResolutionOutcome(entity=synthesize(key), strategy=MatchStrategy.SYNTHESIZED)

    def _client_rescue(
        self,
        key: LookupKey,
        catalog: Catalog,
        clients: Sequence[CatalogEntity],
    ) -> ResolutionOutcome | None:
        name = canonical_name(key.normalized, self._aliases)
        if name is not None:
            entity = find_by_canonical_name(name, clients) or known_client(key.normalized, name)
            log.debug("Resolved %r via alias -> %s", key.raw, entity.id)
            return ResolutionOutcome(entity=entity, strategy=MatchStrategy.ALIAS)

        others = tuple(
            entity
            for entity in catalog.entities
            if entity.kind is not EntityKind.CLIENT and entity.origin is not Origin.RESOLVER
        )
        hit = run_strategies(key, others, self._strategies)
        if hit is None:
            return None
        _, entity = hit
        log.debug("Rescued %r from %s records as a client", key.raw, entity.kind)
        return ResolutionOutcome(
            entity=entity.with_kind(
                EntityKind.CLIENT,
                entity_id=normalize(entity.id, with_prefix=True),
            ),
            strategy=MatchStrategy.KIND_RESCUE,
        )

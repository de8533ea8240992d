"""Session-lifetime memo of resolution outcomes."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mcpcatalog.domain.catalog import CatalogUpdated

    from .contracts import CacheKey, ResolutionOutcome

log = logging.getLogger(__name__)


class ResolutionCache:
    """Outcomes keyed by ``(kind hint, normalized key)``.

    Synthesized outcomes are stored like any other and double as the negative
    result for a key. There is no TTL; ``invalidate_all`` is the only eviction.
    """

    def __init__(self) -> None:
        self._entries: dict[CacheKey, ResolutionOutcome] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: CacheKey) -> ResolutionOutcome | None:
        return self._entries.get(key)

    def put(self, key: CacheKey, outcome: ResolutionOutcome) -> None:
        self._entries[key] = outcome

    def invalidate_all(self) -> None:
        if self._entries:
            log.debug("Dropping %s cached resolutions", len(self._entries))
        self._entries.clear()

    def on_catalog_updated(self, _event: CatalogUpdated) -> None:
        self.invalidate_all()

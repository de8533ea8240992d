"""Shared resolution contract components.

This module holds only:
- the lookup key derived once per ``resolve`` call
- the outcome returned to callers and stored in the cache
- the strategy tags and the synthesis retention policy
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from mcpcatalog.domain.identifiers import compact, normalize, strip_client_prefix
from mcpcatalog.domain.model import KindHint

if TYPE_CHECKING:
    from mcpcatalog.domain.model import CatalogEntity


CacheKey: TypeAlias = "tuple[KindHint, str]"

PARTIAL_WORD_MIN_LENGTH = 3
PREFIX_MIN_LENGTH = 3


class MatchStrategy(StrEnum):
    """Cascade stage that produced an outcome, in cascade order."""

    CACHE = "cache"
    EXACT_ID = "exact_id"
    NAME_AS_SLUG = "name_as_slug"
    COMPACT_NAME = "compact_name"
    PREFIX = "prefix"
    ALIAS = "alias"
    KIND_RESCUE = "kind_rescue"
    PARTIAL_WORD = "partial_word"
    SYNTHESIZED = "synthesized"


@dataclass(slots=True, frozen=True, kw_only=True)
class LookupKey:
    """Every comparable form of one untrusted route segment."""

    raw: str
    kind_hint: KindHint
    normalized: str

    @classmethod
    def from_raw(cls, raw: str | None, kind_hint: KindHint) -> LookupKey:
        return cls(raw=raw or "", kind_hint=kind_hint, normalized=normalize(raw))

    @property
    def unprefixed(self) -> str:
        return strip_client_prefix(self.raw)

    @property
    def spaced(self) -> str:
        return self.normalized.replace("-", " ")

    @property
    def compact(self) -> str:
        return compact(self.normalized)

    @property
    def words(self) -> tuple[str, ...]:
        return tuple(
            word for word in self.normalized.split("-") if len(word) >= PARTIAL_WORD_MIN_LENGTH
        )

    @property
    def cache_key(self) -> CacheKey:
        return (self.kind_hint, self.normalized)


@dataclass(slots=True, frozen=True, kw_only=True)
class ResolutionOutcome:
    entity: CatalogEntity
    strategy: MatchStrategy
    from_cache: bool = False

    @property
    def synthesized(self) -> bool:
        return self.entity.synthesized

    def as_cached(self) -> ResolutionOutcome:
        return dataclasses.replace(self, from_cache=True)


@dataclass(slots=True, frozen=True)
class SynthesisPolicy:
    """Whether resolver-built entities join the in-memory catalog, and how many.

    Retained placeholders are never persisted and disappear on the next merge.
    """

    retain: bool = True
    max_retained: int = 256

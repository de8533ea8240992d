"""Entity resolution: cascade, strategies and the outcome cache."""

from __future__ import annotations

from .aliases import CLIENT_ALIASES
from .cache import ResolutionCache
from .contracts import LookupKey, MatchStrategy, ResolutionOutcome, SynthesisPolicy
from .resolver import EntityResolver, coerce_hint

__all__ = [
    "CLIENT_ALIASES",
    "EntityResolver",
    "LookupKey",
    "MatchStrategy",
    "ResolutionCache",
    "ResolutionOutcome",
    "SynthesisPolicy",
    "coerce_hint",
]

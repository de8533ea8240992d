"""Domain port definitions for adapters."""

from __future__ import annotations

from .loading import RawRecords, SourceLoader, SourceLoadResult
from .storage import KeyValueStore

__all__ = [
    "KeyValueStore",
    "RawRecords",
    "SourceLoadResult",
    "SourceLoader",
]

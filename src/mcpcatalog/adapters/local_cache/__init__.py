"""Locally edited catalog records."""

from __future__ import annotations

from .loader import (
    STORAGE_KEYS,
    CorruptLocalDataError,
    LocalCacheLoader,
    LocalCacheWriter,
    decode_records,
    storage_key,
)

__all__ = [
    "STORAGE_KEYS",
    "CorruptLocalDataError",
    "LocalCacheLoader",
    "LocalCacheWriter",
    "decode_records",
    "storage_key",
]

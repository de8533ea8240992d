"""Public interface for the remote products API adapter."""

from __future__ import annotations

from .client import RemoteCatalogLoader, SourceUnavailableError

__all__ = [
    "RemoteCatalogLoader",
    "SourceUnavailableError",
]

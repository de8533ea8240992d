"""Catalog records bundled with the package."""

from __future__ import annotations

from .loader import FixtureLoader

__all__ = ["FixtureLoader"]

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from mcpcatalog.adapters.http_resilience import shared_limiter
from mcpcatalog.adapters.kv_store import InMemoryKeyValueStore, SqlAlchemyKeyValueStore

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

_CATALOG_ENV_VARS = tuple(name for name in os.environ if name.startswith("CATALOG_"))


@pytest.fixture(autouse=True)
def _isolated_catalog_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in _CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "data"))
    shared_limiter.cache_clear()


@pytest.fixture
def kv_store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def sqlite_kv_store(tmp_path: Path) -> Iterator[SqlAlchemyKeyValueStore]:
    store = SqlAlchemyKeyValueStore(uri=f"sqlite+pysqlite:///{tmp_path / 'kv.db'}")
    try:
        yield store
    finally:
        store.dispose()

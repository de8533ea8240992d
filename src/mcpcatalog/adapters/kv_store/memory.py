"""Process-local key/value store."""

from __future__ import annotations

from typing import TYPE_CHECKING

from mcpcatalog.domain.ports import KeyValueStore


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[tuple[str, str], str] | None = None) -> None:
        self._values: dict[tuple[str, str], str] = dict(initial or {})

    def get(self, namespace: str, key: str) -> str | None:
        return self._values.get((namespace, key))

    def set(self, namespace: str, key: str, value: str) -> None:
        self._values[(namespace, key)] = value

    def delete(self, namespace: str, key: str) -> None:
        self._values.pop((namespace, key), None)


if TYPE_CHECKING:
    _store_check: KeyValueStore = InMemoryKeyValueStore()

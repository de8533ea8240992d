"""Port for the flat key/value storage that holds locally edited records."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class KeyValueStore(Protocol):
    """String values addressed by ``(namespace, key)``.

    Namespaces separate environments (``production``/``development``); keys name
    one JSON array per entity kind.
    """

    def get(self, namespace: str, key: str) -> str | None: ...

    def set(self, namespace: str, key: str, value: str) -> None: ...

    def delete(self, namespace: str, key: str) -> None: ...


__all__ = ["KeyValueStore"]

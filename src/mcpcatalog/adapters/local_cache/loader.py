"""Locally edited records kept as one JSON array per kind in a key/value store."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from mcpcatalog.adapters.records import entity_to_record, parse_records
from mcpcatalog.domain.identifiers import normalize
from mcpcatalog.domain.model import LISTED_KINDS, EntityKind, Environment, Origin
from mcpcatalog.domain.ports import SourceLoadResult

if TYPE_CHECKING:
    from mcpcatalog.domain.model import CatalogEntity
    from mcpcatalog.domain.ports import KeyValueStore, RawRecords

log = getLogger(__name__)

STORAGE_KEYS: Final[Mapping[EntityKind, str]] = {
    EntityKind.SERVER: "mcp_servers_data",
    EntityKind.CLIENT: "mcp_clients_data",
    EntityKind.AGENT: "ai_agents_data",
}


class CorruptLocalDataError(ValueError):
    """Raised when a stored value is not a JSON array."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"{key}: {reason}")
        self.key = key


def storage_key(kind: EntityKind) -> str:
    try:
        return STORAGE_KEYS[kind]
    except KeyError:
        msg = f"No local storage key for {kind} records"
        raise ValueError(msg) from None


def decode_records(key: str, text: str) -> list[object]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CorruptLocalDataError(key, f"invalid JSON ({exc.msg})") from exc
    if not isinstance(raw, list):
        raise CorruptLocalDataError(key, f"expected a JSON array, got {type(raw).__name__}")
    return raw


@dataclass(slots=True)
class LocalCacheLoader:
    """Reads the server, client and agent arrays of one environment namespace."""

    store: KeyValueStore
    environment: Environment = Environment.PRODUCTION
    kinds: tuple[EntityKind, ...] = LISTED_KINDS

    def __call__(self) -> SourceLoadResult:
        records: list[CatalogEntity] = []
        for kind in self.kinds:
            records.extend(self.load_kind(kind))
        return SourceLoadResult(origin=Origin.LOCAL, records=tuple(records))

    def load_kind(self, kind: EntityKind) -> RawRecords:
        """Records of one kind; absent or corrupt values read as empty."""

        key = storage_key(kind)
        text = self.store.get(self.environment.value, key)
        if text is None:
            return ()
        try:
            items = decode_records(key, text)
        except CorruptLocalDataError as exc:
            log.warning("Ignoring corrupt local %s data: %s", self.environment, exc)
            return ()
        records = parse_records(items, origin=Origin.LOCAL, kind=kind)
        log.debug("Loaded %s local %s records", len(records), kind)
        return records


@dataclass(slots=True)
class LocalCacheWriter:
    """Admin edits: rewrite a kind's whole array after changing one record."""

    store: KeyValueStore
    environment: Environment = Environment.PRODUCTION

    def upsert(self, kind: EntityKind, record: Mapping[str, object]) -> CatalogEntity:
        """Insert ``record`` or replace the stored record with the same id."""

        parsed = parse_records([record], origin=Origin.LOCAL, kind=kind)
        if not parsed:
            msg = f"Record {record.get('name')!r} cannot be stored as a {kind}"
            raise ValueError(msg)
        entity = parsed[0]
        target = normalize(entity.id)

        items = self._read(kind)
        stored = entity_to_record(entity)
        for index, item in enumerate(items):
            if _item_key(item) == target:
                items[index] = stored
                break
        else:
            items.append(stored)
        self._write(kind, items)
        return entity

    def delete(self, kind: EntityKind, raw_id: str) -> bool:
        """Drop the record whose normalized id matches; ``False`` when none did."""

        target = normalize(raw_id)
        items = self._read(kind)
        kept = [item for item in items if _item_key(item) != target]
        if len(kept) == len(items):
            return False
        self._write(kind, kept)
        return True

    def _read(self, kind: EntityKind) -> list[object]:
        key = storage_key(kind)
        text = self.store.get(self.environment.value, key)
        if text is None:
            return []
        try:
            return decode_records(key, text)
        except CorruptLocalDataError as exc:
            log.warning("Overwriting corrupt local %s data: %s", self.environment, exc)
            return []

    def _write(self, kind: EntityKind, items: list[object]) -> None:
        key = storage_key(kind)
        self.store.set(self.environment.value, key, json.dumps(items))
        log.info("Stored %s local %s records", len(items), kind)


def _item_key(item: object) -> str | None:
    if not isinstance(item, Mapping):
        return None
    raw = item.get("id") or item.get("name")
    if raw is None:
        return None
    return normalize(str(raw))

"""SQLite (or any SQLAlchemy URI) backed key/value store."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy import Column, MetaData, String, Table, Text, create_engine, delete, select
from sqlalchemy.orm import Session, sessionmaker

from mcpcatalog.domain.ports import KeyValueStore

if TYPE_CHECKING:
    from sqlalchemy.engine import Engine

log = logging.getLogger(__name__)

metadata = MetaData()

catalog_kv_table = Table(
    "catalog_kv",
    metadata,
    Column("namespace", String(64), primary_key=True),
    Column("key", String(128), primary_key=True),
    Column("value", Text, nullable=False),
)


class SqlAlchemyKeyValueStore:
    """One row per ``(namespace, key)``; the table is created on first use."""

    def __init__(self, *, engine: Engine | None = None, uri: str | None = None) -> None:
        if engine is None:
            if uri is None:
                raise ValueError("SqlAlchemyKeyValueStore needs an engine or a database URI")
            engine = create_engine(uri, future=True)
        self.engine = engine
        self._session_factory = sessionmaker(bind=engine, expire_on_commit=False)
        self._ready = False

    def _session(self) -> Session:
        if not self._ready:
            metadata.create_all(self.engine)
            log.debug("Ensured table %s on %s", catalog_kv_table.name, self.engine.url)
            self._ready = True
        return self._session_factory()

    def get(self, namespace: str, key: str) -> str | None:
        stmt = select(catalog_kv_table.c.value).where(
            catalog_kv_table.c.namespace == namespace,
            catalog_kv_table.c.key == key,
        )
        with self._session() as session:
            return session.execute(stmt).scalar_one_or_none()

    def set(self, namespace: str, key: str, value: str) -> None:
        with self._session() as session, session.begin():
            session.execute(
                delete(catalog_kv_table).where(
                    catalog_kv_table.c.namespace == namespace,
                    catalog_kv_table.c.key == key,
                )
            )
            session.execute(
                catalog_kv_table.insert().values(namespace=namespace, key=key, value=value)
            )

    def delete(self, namespace: str, key: str) -> None:
        with self._session() as session, session.begin():
            session.execute(
                delete(catalog_kv_table).where(
                    catalog_kv_table.c.namespace == namespace,
                    catalog_kv_table.c.key == key,
                )
            )

    def dispose(self) -> None:
        self.engine.dispose()


if TYPE_CHECKING:
    _store_check: KeyValueStore = SqlAlchemyKeyValueStore(uri="sqlite+pysqlite:///:memory:")

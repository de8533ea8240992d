"""Loader for the JSON collections bundled with the package."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from importlib.resources import files
from logging import getLogger
from typing import TYPE_CHECKING, Final

from mcpcatalog.adapters.records import parse_records
from mcpcatalog.domain.model import EntityKind, Origin
from mcpcatalog.domain.ports import SourceLoader, SourceLoadResult

if TYPE_CHECKING:
    from importlib.resources.abc import Traversable

    from mcpcatalog.domain.model import CatalogEntity

log = getLogger(__name__)

SOLUTIONS_FILE: Final[str] = "solutions.json"
SERVERS_FILE: Final[str] = "mcp_servers.json"


def _bundled_data() -> Traversable:
    return files(__package__ or "mcpcatalog.adapters.fixtures") / "data"


@dataclass(slots=True)
class FixtureLoader:
    """Reads ``solutions.json`` then ``mcp_servers.json``; every record is a server.

    Server entries whose name already appears among the solutions are skipped.
    """

    data_dir: Traversable = field(default_factory=_bundled_data)

    def __call__(self) -> SourceLoadResult:
        try:
            solutions = self._read(SOLUTIONS_FILE)
            servers = self._read(SERVERS_FILE)
        except (OSError, ValueError) as exc:
            log.warning("Bundled catalog data unreadable: %s", exc)
            return SourceLoadResult.unavailable(Origin.FIXTURES, str(exc))

        seen = {entity.name.casefold() for entity in solutions}
        extra = tuple(entity for entity in servers if entity.name.casefold() not in seen)
        if len(extra) < len(servers):
            skipped = len(servers) - len(extra)
            log.debug("Skipped %s bundled servers already listed as solutions", skipped)
        records = solutions + extra
        log.info("Loaded %s bundled records", len(records))
        return SourceLoadResult(origin=Origin.FIXTURES, records=records)

    def _read(self, filename: str) -> tuple[CatalogEntity, ...]:
        raw = json.loads(self.data_dir.joinpath(filename).read_text(encoding="utf-8"))
        if not isinstance(raw, list):
            msg = f"{filename} must hold a JSON array"
            raise ValueError(msg)  # noqa: TRY004
        return parse_records(raw, origin=Origin.FIXTURES, kind=EntityKind.SERVER, backfill=True)


if TYPE_CHECKING:
    _loader_check: SourceLoader = FixtureLoader()

"""Ports for loading raw catalog records from their origins."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from mcpcatalog.domain.model import CatalogEntity, Origin

RawRecords: TypeAlias = "tuple[CatalogEntity, ...]"


@dataclass(slots=True, frozen=True)
class SourceLoadResult:
    """Records read from one origin, or the reason the origin was unavailable.

    A failed load carries no records; callers fall through to the next source.
    """

    origin: Origin
    records: RawRecords = ()
    failure: str | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def unavailable(cls, origin: Origin, reason: str) -> SourceLoadResult:
        return cls(origin=origin, failure=reason)


@runtime_checkable
class SourceLoader(Protocol):
    """Callable port that reads one origin and never raises past its boundary."""

    def __call__(self) -> SourceLoadResult: ...


__all__ = ["RawRecords", "SourceLoadResult", "SourceLoader"]

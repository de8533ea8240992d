"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class EntityKind(StrEnum):
    """Discriminator for the polymorphic catalog record shape."""

    SERVER = "server"
    CLIENT = "client"
    AGENT = "agent"
    CATEGORY = "category"


class KindHint(StrEnum):
    """Kind expected by a lookup; ``UNKNOWN`` searches every listed kind."""

    SERVER = "server"
    CLIENT = "client"
    AGENT = "agent"
    UNKNOWN = "unknown"

    @property
    def kind(self) -> EntityKind | None:
        if self is KindHint.UNKNOWN:
            return None
        return EntityKind(self.value)


class Origin(StrEnum):
    """Which loader (or component) produced a record."""

    FIXTURES = "fixtures"
    REMOTE = "remote"
    LOCAL = "local"
    RESOLVER = "resolver"


class Environment(StrEnum):
    """Namespace for locally persisted edits."""

    PRODUCTION = "production"
    DEVELOPMENT = "development"


LISTED_KINDS: tuple[EntityKind, ...] = (EntityKind.SERVER, EntityKind.CLIENT, EntityKind.AGENT)

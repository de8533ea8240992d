"""Catalog service configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from mcpcatalog.domain.model import Environment
from mcpcatalog.domain.resolution.contracts import SynthesisPolicy

from .env import env_choice, env_float, env_int, env_str
from .http_resilience import RateLimit, ResilienceConfig
from .storage import StorageConfig, get_storage_config

CATALOG_API_BASE_URL = "http://localhost:3001/api"
CATALOG_API_LIMIT = 50
CATALOG_API_TIMEOUT_SECONDS = 5.0
CATALOG_API_MAX_REQUESTS_PER_MINUTE = 0


@dataclass(frozen=True, slots=True)
class CatalogApiConfig:
    """Remote product API settings."""

    base_url: str = CATALOG_API_BASE_URL
    limit: int = CATALOG_API_LIMIT
    resilience: ResilienceConfig = field(
        default_factory=lambda: catalog_api_resilience(CATALOG_API_BASE_URL)
    )


@dataclass(frozen=True, slots=True)
class CatalogConfig:
    environment: Environment = Environment.PRODUCTION
    api: CatalogApiConfig = field(default_factory=CatalogApiConfig)
    synthesis: SynthesisPolicy = field(default_factory=SynthesisPolicy)
    storage: StorageConfig | None = None


def catalog_api_resilience(
    base_url: str,
    *,
    timeout_seconds: float = CATALOG_API_TIMEOUT_SECONDS,
    max_requests_per_minute: int = CATALOG_API_MAX_REQUESTS_PER_MINUTE,
) -> ResilienceConfig:
    """One bounded attempt per refresh; ``max_requests_per_minute=0`` disables the limit."""

    ratelimit = (
        RateLimit(max_calls=max_requests_per_minute, per_seconds=60.0)
        if max_requests_per_minute
        else None
    )
    return ResilienceConfig(
        name="catalog-api",
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        ratelimit=ratelimit,
        default_headers={"Cache-Control": "no-cache"},
    )


def get_catalog_config() -> CatalogConfig:
    environment = Environment(
        env_choice(
            "CATALOG_ENVIRONMENT",
            Environment.PRODUCTION.value,
            choices=[member.value for member in Environment],
        )
    )
    base_url = env_str("CATALOG_API_BASE_URL", CATALOG_API_BASE_URL).rstrip("/")
    api = CatalogApiConfig(
        base_url=base_url,
        limit=env_int("CATALOG_API_LIMIT", CATALOG_API_LIMIT),
        resilience=catalog_api_resilience(
            base_url,
            timeout_seconds=env_float("CATALOG_API_TIMEOUT_SECONDS", CATALOG_API_TIMEOUT_SECONDS),
            max_requests_per_minute=env_int(
                "CATALOG_API_MAX_REQUESTS_PER_MINUTE",
                CATALOG_API_MAX_REQUESTS_PER_MINUTE,
                minimum=0,
            ),
        ),
    )
    synthesis = SynthesisPolicy(
        retain=env_choice("CATALOG_RETAIN_SYNTHESIZED", "true", choices=("true", "false"))
        == "true",
        max_retained=env_int("CATALOG_MAX_SYNTHESIZED", SynthesisPolicy().max_retained),
    )
    return CatalogConfig(
        environment=environment,
        api=api,
        synthesis=synthesis,
        storage=get_storage_config(),
    )

"""Application configuration helpers."""

from __future__ import annotations

from .catalog import (
    CatalogApiConfig,
    CatalogConfig,
    catalog_api_resilience,
    get_catalog_config,
)
from .env import env_choice, env_float, env_int, env_str
from .errors import ConfigurationError, InvalidConfigurationError
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .storage import KeyValueStoreConfig, StorageConfig, get_storage_config, get_store_config

__all__ = [
    "CatalogApiConfig",
    "CatalogConfig",
    "ConfigurationError",
    "InvalidConfigurationError",
    "KeyValueStoreConfig",
    "RateLimit",
    "ResilienceConfig",
    "StorageConfig",
    "catalog_api_resilience",
    "configure_logging",
    "env_choice",
    "env_float",
    "env_int",
    "env_str",
    "get_catalog_config",
    "get_storage_config",
    "get_store_config",
]

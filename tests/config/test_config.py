from __future__ import annotations

import logging
from pathlib import Path

import pytest

from mcpcatalog.config import (
    CatalogConfig,
    ConfigurationError,
    InvalidConfigurationError,
    RateLimit,
    configure_logging,
    env_choice,
    env_float,
    env_int,
    get_catalog_config,
    get_storage_config,
    get_store_config,
)
from mcpcatalog.domain.model import Environment


def test_catalog_config_defaults() -> None:
    config = get_catalog_config()

    assert config.environment is Environment.PRODUCTION
    assert config.api.base_url == "http://localhost:3001/api"
    assert config.api.limit == 50
    assert config.api.resilience.timeout_seconds == 5.0
    assert config.api.resilience.ratelimit is None
    assert config.synthesis.retain is True
    assert config.synthesis.max_retained == 256


def test_catalog_config_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_ENVIRONMENT", "Development")
    monkeypatch.setenv("CATALOG_API_BASE_URL", "https://api.example.test/v1/")
    monkeypatch.setenv("CATALOG_API_LIMIT", "10")
    monkeypatch.setenv("CATALOG_API_TIMEOUT_SECONDS", "1.5")
    monkeypatch.setenv("CATALOG_API_MAX_REQUESTS_PER_MINUTE", "30")
    monkeypatch.setenv("CATALOG_RETAIN_SYNTHESIZED", "false")
    monkeypatch.setenv("CATALOG_MAX_SYNTHESIZED", "3")

    config = get_catalog_config()

    assert config.environment is Environment.DEVELOPMENT
    assert config.api.base_url == "https://api.example.test/v1"
    assert config.api.resilience.base_url == "https://api.example.test/v1"
    assert config.api.limit == 10
    assert config.api.resilience.timeout_seconds == 1.5
    assert config.api.resilience.ratelimit == RateLimit(max_calls=30, per_seconds=60.0)
    assert config.synthesis.retain is False
    assert config.synthesis.max_retained == 3


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("CATALOG_ENVIRONMENT", "staging"),
        ("CATALOG_API_LIMIT", "many"),
        ("CATALOG_API_LIMIT", "0"),
        ("CATALOG_API_TIMEOUT_SECONDS", "-1"),
        ("CATALOG_API_MAX_REQUESTS_PER_MINUTE", "-1"),
        ("CATALOG_RETAIN_SYNTHESIZED", "maybe"),
    ],
)
def test_invalid_values_raise(monkeypatch: pytest.MonkeyPatch, name: str, value: str) -> None:
    monkeypatch.setenv(name, value)

    with pytest.raises(InvalidConfigurationError) as exc:
        get_catalog_config()

    assert exc.value.name == name
    assert isinstance(exc.value, ConfigurationError)


def test_blank_values_fall_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXAMPLE_INT", "  ")
    monkeypatch.setenv("EXAMPLE_FLOAT", "")
    monkeypatch.setenv("EXAMPLE_CHOICE", " ")

    assert env_int("EXAMPLE_INT", 7) == 7
    assert env_float("EXAMPLE_FLOAT", 2.5) == 2.5
    assert env_choice("EXAMPLE_CHOICE", "a", choices=("a", "b")) == "a"


def test_storage_paths_follow_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CATALOG_DATA_DIR", str(tmp_path / "store"))

    storage = get_storage_config()

    assert storage.store_path() == (tmp_path / "store" / "catalog_store.db").resolve()
    assert (tmp_path / "store").is_dir()
    assert get_store_config(storage=storage).uri.startswith("sqlite+pysqlite:///")


def test_store_uri_override(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_STORE_URI", "sqlite+pysqlite:///:memory:")

    assert get_store_config().uri == "sqlite+pysqlite:///:memory:"


def test_config_is_constructible_without_environment() -> None:
    config = CatalogConfig()

    assert config.storage is None
    assert config.api.resilience.name == "catalog-api"


def test_configure_logging_reads_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CATALOG_LOG_LEVEL", "debug")
    root = logging.getLogger()
    previous_level = root.level
    previous_handlers = root.handlers[:]
    try:
        configure_logging(force=True)

        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = previous_handlers
        root.setLevel(previous_level)
        logging.getLogger("httpx").setLevel(logging.NOTSET)

"""Environment variable loaders for configuration."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import InvalidConfigurationError

if TYPE_CHECKING:
    from collections.abc import Collection


def env_str(name: str, default: str) -> str:
    """Return an environment variable, falling back when it is absent or blank."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip()


def env_int(name: str, default: int, *, minimum: int = 1) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(name, raw, expected="an integer") from exc
    if value < minimum:
        raise InvalidConfigurationError(name, raw, expected=f"an integer >= {minimum}")
    return value


def env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise InvalidConfigurationError(name, raw, expected="a number") from exc
    if value <= 0:
        raise InvalidConfigurationError(name, raw, expected="a positive number")
    return value


def env_choice(name: str, default: str, *, choices: Collection[str]) -> str:
    value = env_str(name, default).lower()
    if value not in choices:
        options = ", ".join(sorted(choices))
        raise InvalidConfigurationError(name, value, expected=f"one of {options}")
    return value

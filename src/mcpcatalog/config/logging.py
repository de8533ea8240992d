"""Logging setup for processes embedding the catalog service."""

from __future__ import annotations

import logging

from .env import env_choice

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_LEVELS = ("debug", "info", "warning", "error")
# per-request INFO lines from the HTTP stack
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(*, level: int | None = None, force: bool = False) -> None:
    """Initialise the root logger with the terse catalog format.

    ``level`` defaults to ``CATALOG_LOG_LEVEL`` (``info`` when unset). Pass
    ``force=True`` to reconfigure an already configured root logger.
    """

    if level is None:
        level = logging.getLevelNamesMapping()[
            env_choice("CATALOG_LOG_LEVEL", "info", choices=_LEVELS).upper()
        ]
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S", force=force)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

"""Logging setup."""

from __future__ import annotations

import logging

from .config import LOG_LEVEL

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure the root logger once from ``LOG_LEVEL``."""

    logging.basicConfig(level=(level or LOG_LEVEL), format=_FORMAT)


__all__ = ["configure_logging"]

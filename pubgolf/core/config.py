"""Application settings and environment helpers."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List

from dotenv import load_dotenv

load_dotenv(override=False)

logger = logging.getLogger(__name__)

_PROJECT_ROOT = Path(__file__).resolve().parents[2]
DATA_DIR = Path(os.getenv("DATA_DIR", str(_PROJECT_ROOT / "data")))


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%s (not an integer)", name, raw)
        return default


def _split_csv(raw: str | None) -> List[str]:
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


def _unique(values: Iterable[str]) -> List[str]:
    seen = set()
    ordered: List[str] = []
    for value in values:
        if value not in seen:
            seen.add(value)
            ordered.append(value)
    return ordered


# Database -------------------------------------------------------------------
DATABASE_URL = os.getenv("DATABASE_URL") or f"sqlite:///{DATA_DIR / 'pub_golf.db'}"
DB_RESET = _env_bool("DB_RESET", False)
SEED_ON_STARTUP = _env_bool("SEED_ON_STARTUP", True)


# HTTP -----------------------------------------------------------------------
# Comma-separated list; any origin when unset.
ALLOWED_CORS_ORIGINS = _unique(_split_csv(os.getenv("ALLOWED_CORS_ORIGINS"))) or ["*"]

APP_NAME = os.getenv("APP_NAME", "Pub Golf")
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = _env_int("APP_PORT", _env_int("PORT", 8000))


# Logging --------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
UVICORN_LOG_LEVEL = os.getenv("UVICORN_LOG_LEVEL", "info")


__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_HOST",
    "APP_NAME",
    "APP_PORT",
    "DATABASE_URL",
    "DATA_DIR",
    "DB_RESET",
    "LOG_LEVEL",
    "SEED_ON_STARTUP",
    "UVICORN_LOG_LEVEL",
]

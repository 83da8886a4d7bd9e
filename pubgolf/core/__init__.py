"""Core configuration and infrastructure helpers."""

from .config import (
    ALLOWED_CORS_ORIGINS,
    APP_HOST,
    APP_NAME,
    APP_PORT,
    DATABASE_URL,
    DB_RESET,
    LOG_LEVEL,
    SEED_ON_STARTUP,
    UVICORN_LOG_LEVEL,
)
from .database import engine, get_session
from .logging import configure_logging

__all__ = [
    "ALLOWED_CORS_ORIGINS",
    "APP_HOST",
    "APP_NAME",
    "APP_PORT",
    "DATABASE_URL",
    "DB_RESET",
    "LOG_LEVEL",
    "SEED_ON_STARTUP",
    "UVICORN_LOG_LEVEL",
    "configure_logging",
    "engine",
    "get_session",
]

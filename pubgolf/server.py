"""Console entry point that serves the API with uvicorn."""

from __future__ import annotations

import logging

import uvicorn

from .core import APP_HOST, APP_PORT, UVICORN_LOG_LEVEL, configure_logging

logger = logging.getLogger(__name__)
APP_MODULE = "pubgolf.app:app"


def main() -> None:
    configure_logging()
    logger.info("Starting %s on %s:%s", APP_MODULE, APP_HOST, APP_PORT)
    uvicorn.run(
        APP_MODULE,
        host=APP_HOST,
        port=APP_PORT,
        log_level=UVICORN_LOG_LEVEL,
    )


if __name__ == "__main__":
    main()

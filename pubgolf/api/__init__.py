"""API assembly helpers."""

from __future__ import annotations

import logging

from fastapi import FastAPI

from .routers import ALL_ROUTERS

logger = logging.getLogger(__name__)


def register_routes(app: FastAPI) -> None:
    """Attach the scoring routers (system, roster, holes, scores, standings, admin)."""

    for router in ALL_ROUTERS:
        app.include_router(router)
        logger.debug("Registered %s routes: %s", router.tags, [r.path for r in router.routes])


__all__ = ["register_routes"]

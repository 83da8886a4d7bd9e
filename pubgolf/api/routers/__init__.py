"""Aggregate API routers."""

from fastapi import APIRouter

from .admin import router as admin_router
from .holes import router as holes_router
from .players import router as players_router
from .scores import router as scores_router
from .standings import router as standings_router
from .system import router as system_router
from .teams import router as teams_router

ALL_ROUTERS: tuple[APIRouter, ...] = (
    system_router,
    teams_router,
    players_router,
    holes_router,
    scores_router,
    standings_router,
    admin_router,
)

__all__ = ["ALL_ROUTERS"]

"""System-level API endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import APP_NAME, get_session
from ...services import store

router = APIRouter(tags=["system"])


@router.get("/health")
def health() -> Dict[str, bool]:
    """Simple readiness probe."""

    return {"ok": True}


@router.get("/config")
def get_config(session: Session = Depends(get_session)) -> Dict[str, Any]:
    """Expose frontend configuration values."""

    return {
        "app_name": APP_NAME,
        "hole_count": len(store.list_holes(session)),
    }


__all__ = ["router"]

"""Game maintenance endpoints."""

from __future__ import annotations

from typing import Dict

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import store

router = APIRouter(tags=["admin"])


@router.post("/reset")
def reset_game(session: Session = Depends(get_session)) -> Dict[str, bool]:
    """Clear every score and set every par back to 0."""

    store.reset_all(session)
    return {"ok": True}


__all__ = ["router"]

"""Player endpoints."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends
from sqlmodel import Session

from ...core import get_session
from ...services import store
from ...services.serializers import player_to_dict

router = APIRouter(tags=["players"])


@router.get("/users")
def list_players(team_id: Optional[int] = None, session: Session = Depends(get_session)):
    """List players, optionally only those on one team."""

    return [player_to_dict(player) for player in store.list_players(session, team_id)]


__all__ = ["router"]

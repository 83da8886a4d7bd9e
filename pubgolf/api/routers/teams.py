"""Team endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session
from ...services import store
from ...services.serializers import player_to_dict, team_to_dict

router = APIRouter(tags=["teams"])


@router.get("/teams")
def list_teams(session: Session = Depends(get_session)):
    """List all teams."""

    return [team_to_dict(team) for team in store.list_teams(session)]


@router.get("/teams/{team_id}/users")
def list_team_players(team_id: int, session: Session = Depends(get_session)):
    """List the players on a team."""

    if not store.get_team(session, team_id):
        raise HTTPException(404, "Team not found")
    return [player_to_dict(player) for player in store.list_players(session, team_id)]


__all__ = ["router"]

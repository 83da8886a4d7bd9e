"""Standings endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session
from ...services import compute_hole_result, compute_overall_standings, store
from ...services.serializers import hole_result_to_dict, standings_to_dict

router = APIRouter(tags=["standings"])


@router.get("/holes/{hole_id}/standings")
def get_hole_standings(hole_id: int, session: Session = Depends(get_session)):
    """Team averages and the leading team for a single hole."""

    hole = store.get_hole(session, hole_id)
    if not hole:
        raise HTTPException(404, "Hole not found")

    result = compute_hole_result(
        hole,
        store.list_teams(session),
        store.list_players(session),
        store.list_scores(session, hole_id),
    )
    return hole_result_to_dict(result)


@router.get("/standings")
def get_standings(session: Session = Depends(get_session)):
    """Per-hole results for every hole plus the overall leader."""

    standings = compute_overall_standings(
        store.list_holes(session),
        store.list_teams(session),
        store.list_players(session),
        store.list_scores(session),
    )
    return standings_to_dict(standings)


__all__ = ["router"]

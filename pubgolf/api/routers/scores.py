"""Score endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session
from ...services import store
from ...services.serializers import score_to_dict
from ...services.validation import ValidationError, parse_sips

router = APIRouter(tags=["scores"])


@router.get("/scores")
def list_scores(session: Session = Depends(get_session)):
    """List every recorded score."""

    return [score_to_dict(score) for score in store.list_scores(session)]


@router.get("/holes/{hole_id}/scores")
def list_hole_scores(hole_id: int, session: Session = Depends(get_session)):
    """List the scores recorded on a hole."""

    if not store.get_hole(session, hole_id):
        raise HTTPException(404, "Hole not found")
    return [score_to_dict(score) for score in store.list_scores(session, hole_id)]


@router.get("/users/{user_id}/holes/{hole_id}/score")
def get_score(user_id: int, hole_id: int, session: Session = Depends(get_session)):
    """Get one player's sips on a hole."""

    score = store.get_score(session, user_id, hole_id)
    if not score:
        raise HTTPException(404, "Score not found")
    return score_to_dict(score)


@router.put("/users/{user_id}/holes/{hole_id}/score")
def put_score(
    user_id: int,
    hole_id: int,
    body: Dict[str, Any],
    session: Session = Depends(get_session),
):
    """Record a player's sips on a hole, replacing any earlier value."""

    try:
        sips = parse_sips(body.get("sips"))
    except ValidationError:
        raise HTTPException(400, "Invalid input data")

    if not store.get_player(session, user_id):
        raise HTTPException(404, "Player not found")
    if not store.get_hole(session, hole_id):
        raise HTTPException(404, "Hole not found")

    store.upsert_score(session, user_id, hole_id, sips)
    return {"message": "Score updated successfully"}


__all__ = ["router"]

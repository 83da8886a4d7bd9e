"""Hole endpoints."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException
from sqlmodel import Session

from ...core import get_session
from ...services import store
from ...services.serializers import hole_to_dict
from ...services.validation import ValidationError, parse_par

router = APIRouter(tags=["holes"])


@router.get("/holes")
def list_holes(session: Session = Depends(get_session)):
    """List all holes in crawl order."""

    return [hole_to_dict(hole) for hole in store.list_holes(session)]


@router.get("/holes/{hole_id}")
def get_hole(hole_id: int, session: Session = Depends(get_session)):
    """Get a specific hole by ID."""

    hole = store.get_hole(session, hole_id)
    if not hole:
        raise HTTPException(404, "Hole not found")
    return hole_to_dict(hole)


@router.put("/holes/{hole_id}")
def update_hole_par(
    hole_id: int, body: Dict[str, Any], session: Session = Depends(get_session)
):
    """Set the par of a hole. Body: ``{"par": 3}``."""

    try:
        par = parse_par(body.get("par"))
    except ValidationError:
        raise HTTPException(400, "Invalid input data")

    if not store.set_hole_par(session, hole_id, par):
        raise HTTPException(404, "Hole not found")
    return {"message": "Hole par updated successfully"}


__all__ = ["router"]

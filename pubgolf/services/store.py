"""Persistence helpers for teams, players, holes and scores.

Every function takes an open SQLModel session. Lists are ordered by id so the
standings tie-breaks see rows in insertion order.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy.dialects.postgresql import insert as postgresql_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlmodel import Session, select

from ..models import Hole, Player, Score, Team

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql_insert,
    "sqlite": sqlite_insert,
}


def list_teams(session: Session) -> List[Team]:
    return list(session.exec(select(Team).order_by(Team.id)).all())


def get_team(session: Session, team_id: int) -> Optional[Team]:
    return session.get(Team, team_id)


def list_players(session: Session, team_id: Optional[int] = None) -> List[Player]:
    statement = select(Player)
    if team_id is not None:
        statement = statement.where(Player.team_id == team_id)
    return list(session.exec(statement.order_by(Player.id)).all())


def get_player(session: Session, player_id: int) -> Optional[Player]:
    return session.get(Player, player_id)


def list_holes(session: Session) -> List[Hole]:
    return list(session.exec(select(Hole).order_by(Hole.id)).all())


def get_hole(session: Session, hole_id: int) -> Optional[Hole]:
    return session.get(Hole, hole_id)


def set_hole_par(session: Session, hole_id: int, par: int) -> Optional[Hole]:
    """Update a hole's par. Returns ``None`` when the hole does not exist."""

    hole = session.get(Hole, hole_id)
    if not hole:
        return None

    hole.par = par
    session.add(hole)
    session.commit()
    session.refresh(hole)
    logger.info("Par for hole %s set to %s", hole_id, par)
    return hole


def list_scores(session: Session, hole_id: Optional[int] = None) -> List[Score]:
    statement = select(Score)
    if hole_id is not None:
        statement = statement.where(Score.hole_id == hole_id)
    return list(session.exec(statement.order_by(Score.id)).all())


def get_score(session: Session, user_id: int, hole_id: int) -> Optional[Score]:
    return session.exec(
        select(Score).where(Score.user_id == user_id, Score.hole_id == hole_id)
    ).first()


def upsert_score(session: Session, user_id: int, hole_id: int, sips: int) -> Score:
    """Set the sips for a (player, hole) pair, replacing any earlier value.

    A single ``insert ... on conflict do update`` statement, so concurrent
    writers for the same pair are last-write-wins by commit order.
    """

    dialect = session.get_bind().dialect.name
    insert = _UPSERT_INSERTS.get(dialect)
    if insert is None:
        raise RuntimeError(f"Score upsert is not supported on {dialect}")

    statement = (
        insert(Score)
        .values(user_id=user_id, hole_id=hole_id, sips=sips)
        .on_conflict_do_update(
            index_elements=["user_id", "hole_id"], set_={"sips": sips}
        )
    )
    session.connection().execute(statement)
    session.commit()
    logger.info("Player %s scored %s sips on hole %s", user_id, sips, hole_id)
    return get_score(session, user_id, hole_id)


def reset_all(session: Session) -> None:
    """Delete every score and zero every par in a single commit."""

    try:
        for score in session.exec(select(Score)).all():
            session.delete(score)
        for hole in session.exec(select(Hole)).all():
            hole.par = 0
            session.add(hole)
        session.commit()
    except Exception:
        session.rollback()
        logger.exception("Reset failed, rolled back")
        raise
    logger.info("All scores cleared and pars reset")


__all__ = [
    "get_hole",
    "get_player",
    "get_score",
    "get_team",
    "list_holes",
    "list_players",
    "list_scores",
    "list_teams",
    "reset_all",
    "set_hole_par",
    "upsert_score",
]

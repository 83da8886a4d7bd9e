"""Initial roster and hole list."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Dict, List, Tuple

from sqlmodel import Session, select

from ..models import Hole, Player, Team

logger = logging.getLogger(__name__)

TEAMS: Tuple[str, ...] = ("Blue", "Purple", "Red", "Green")

PLAYERS: Tuple[Tuple[str, str], ...] = (
    ("Logan", "Blue"),
    ("Rod", "Blue"),
    ("Emily", "Blue"),
    ("Georgia", "Blue"),
    ("Hamish", "Purple"),
    ("Clair", "Purple"),
    ("Riley", "Purple"),
    ("Shak", "Red"),
    ("Bertie", "Red"),
    ("Tyler", "Red"),
    ("Sam", "Green"),
    ("Bugg", "Green"),
    ("Charlie", "Green"),
)

# (name, location, start time)
HOLES: Tuple[Tuple[str, str, str], ...] = (
    ("Red Brick Hotel", "83 Annerley Road Woolloongabba", "2024-10-19T14:00:00"),
    ("Brisbane Brewing Co", "601 Stanley Street Woolloongabba", "2024-10-19T15:45:00"),
    ("Rose and Crown", "275 Grey Street South Bank", "2024-10-19T16:30:00"),
    ("Hop and Pickle", "6 Little Stanley Street South Brisbane", "2024-10-19T17:15:00"),
    ("The Charming Squire", "133 Grey Street South Brisbane", "2024-10-19T18:00:00"),
    ("Criterion Tavern", "239 George Street Brisbane", "2024-10-19T18:45:00"),
    ("Gilhooleys", "Albert Street & Charlotte Street Brisbane City", "2024-10-19T20:15:00"),
    ("Winghaus Edward Street", "144 Edward Street Brisbane City", "2024-10-19T21:00:00"),
    ("Pig 'n' Whistle", "123 Eagle Street Brisbane City", "2024-10-19T21:45:00"),
)


def seed_database(session: Session) -> bool:
    """Insert teams, players and holes when the tables are empty.

    Returns ``True`` when data was inserted.
    """

    if session.exec(select(Team)).first() is not None:
        logger.debug("Reference data already present, skipping seed")
        return False

    teams: Dict[str, Team] = {name: Team(name=name) for name in TEAMS}
    session.add_all(teams.values())
    session.flush()

    players: List[Player] = [
        Player(name=name, team_id=teams[team_name].id) for name, team_name in PLAYERS
    ]
    holes: List[Hole] = [
        Hole(name=name, par=0, location=location, time=datetime.fromisoformat(start))
        for name, location, start in HOLES
    ]
    session.add_all(players)
    session.add_all(holes)
    session.commit()

    logger.info(
        "Seeded %d teams, %d players and %d holes", len(teams), len(players), len(holes)
    )
    return True


__all__ = ["HOLES", "PLAYERS", "TEAMS", "seed_database"]

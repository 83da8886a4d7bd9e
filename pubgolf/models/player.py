"""Database model for players."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class Player(SQLModel, table=True):
    """Participant recording sips, optionally assigned to a team."""

    __tablename__ = "users"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    team_id: Optional[int] = ORMField(default=None, foreign_key="teams.id", index=True)


__all__ = ["Player"]

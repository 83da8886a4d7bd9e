"""Database model for per-hole player scores."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field as ORMField, SQLModel


class Score(SQLModel, table=True):
    """Sips recorded by one player on one hole."""

    __tablename__ = "user_scores"
    __table_args__ = (UniqueConstraint("user_id", "hole_id"),)

    id: Optional[int] = ORMField(default=None, primary_key=True)
    user_id: int = ORMField(foreign_key="users.id", index=True)
    hole_id: int = ORMField(foreign_key="holes.id", index=True)
    sips: int


__all__ = ["Score"]

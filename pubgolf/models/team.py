"""Database model for teams."""

from __future__ import annotations

from typing import Optional

from sqlmodel import Field as ORMField, SQLModel


class Team(SQLModel, table=True):
    """A competing team."""

    __tablename__ = "teams"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str


__all__ = ["Team"]

"""Database model for holes."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field as ORMField, SQLModel


class Hole(SQLModel, table=True):
    """A stop on the crawl with an adjustable par."""

    __tablename__ = "holes"

    id: Optional[int] = ORMField(default=None, primary_key=True)
    name: str
    par: int = 0
    location: Optional[str] = None
    # Local venue time, stored without an offset.
    time: Optional[datetime] = ORMField(default=None, sa_type=DateTime)


__all__ = ["Hole"]

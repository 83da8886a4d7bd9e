"""Database model exports."""

from .hole import Hole
from .player import Player
from .score import Score
from .team import Team

__all__ = [
    "Hole",
    "Player",
    "Score",
    "Team",
]

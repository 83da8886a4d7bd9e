"""Service layer helpers."""

from .seed import seed_database
from .standings import (
    HoleResult,
    OverallStandings,
    TeamHoleResult,
    compute_hole_result,
    compute_overall_standings,
)
from .validation import ValidationError, parse_par, parse_sips

__all__ = [
    "HoleResult",
    "OverallStandings",
    "TeamHoleResult",
    "ValidationError",
    "compute_hole_result",
    "compute_overall_standings",
    "parse_par",
    "parse_sips",
    "seed_database",
]

"""Serialise models and standings to API-friendly dicts."""

from __future__ import annotations

from typing import Any, Dict, Optional

from ..models import Hole, Player, Score, Team
from .standings import HoleResult, OverallStandings, TeamHoleResult


def team_to_dict(team: Team) -> Dict[str, Any]:
    """Serialise a team to its wire shape."""

    return {"id": team.id, "name": team.name}


def player_to_dict(player: Player) -> Dict[str, Any]:
    """Serialise a player; ``team_id`` is null for unassigned players."""

    return {"id": player.id, "name": player.name, "team_id": player.team_id}


def hole_to_dict(hole: Hole) -> Dict[str, Any]:
    """Serialise a hole with ``time`` as ISO-8601 or null."""

    return {
        "id": hole.id,
        "name": hole.name,
        "par": hole.par,
        "location": hole.location,
        "time": hole.time.isoformat() if hole.time else None,
    }


def score_to_dict(score: Score) -> Dict[str, Any]:
    """Serialise a score as ``{user_id, hole_id, sips}``."""

    return {"user_id": score.user_id, "hole_id": score.hole_id, "sips": score.sips}


def _optional_team(team: Optional[Team]) -> Optional[Dict[str, Any]]:
    return team_to_dict(team) if team is not None else None


def team_hole_result_to_dict(result: TeamHoleResult) -> Dict[str, Any]:
    """Serialise one team's average and par differential on a hole."""

    return {
        "team": team_to_dict(result.team),
        "averageSips": result.average_sips,
        "differenceFromPar": result.difference_from_par,
    }


def hole_result_to_dict(result: HoleResult) -> Dict[str, Any]:
    """Serialise a hole's team results and leading team."""

    return {
        "hole": hole_to_dict(result.hole),
        "teamResults": [team_hole_result_to_dict(item) for item in result.team_results],
        "winningTeam": _optional_team(result.winning_team),
    }


def standings_to_dict(standings: OverallStandings) -> Dict[str, Any]:
    """Serialise overall standings; ``holeWins`` keys are team ids as strings."""

    return {
        "holes": [hole_result_to_dict(result) for result in standings.hole_results],
        "overallWinner": _optional_team(standings.overall_winner),
        "holeWins": {str(team_id): wins for team_id, wins in standings.hole_wins.items()},
    }


__all__ = [
    "hole_result_to_dict",
    "hole_to_dict",
    "player_to_dict",
    "score_to_dict",
    "standings_to_dict",
    "team_hole_result_to_dict",
    "team_to_dict",
]

"""Team standings aggregation.

Pure functions over in-memory rows: callers load teams, players, holes and
scores from the store and pass them in. Nothing here touches the database.

Ties are resolved by input order. The first team with the lowest average wins
a hole and the first team with the most hole wins leads overall, so callers
must pass teams in a stable order (the store orders by id).
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass(frozen=True)
class TeamHoleResult:
    team: Any
    average_sips: Optional[float]
    difference_from_par: Optional[float]


@dataclass(frozen=True)
class HoleResult:
    hole: Any
    team_results: List[TeamHoleResult]
    winning_team: Optional[Any]


@dataclass(frozen=True)
class OverallStandings:
    hole_results: List[HoleResult]
    overall_winner: Optional[Any]
    hole_wins: Dict[int, int] = field(default_factory=dict)


def _team_by_player(players: Sequence[Any]) -> Dict[int, int]:
    return {
        player.id: player.team_id for player in players if player.team_id is not None
    }


def compute_hole_result(
    hole: Any, teams: Sequence[Any], players: Sequence[Any], scores: Sequence[Any]
) -> HoleResult:
    """Average each team's sips on ``hole`` and pick the lowest average."""

    team_by_player = _team_by_player(players)
    sips_by_team: Dict[int, List[int]] = defaultdict(list)
    for score in scores:
        if score.hole_id != hole.id:
            continue
        team_id = team_by_player.get(score.user_id)
        if team_id is None:
            continue
        sips_by_team[team_id].append(score.sips)

    team_results: List[TeamHoleResult] = []
    winning_team = None
    lowest_average: Optional[float] = None
    for team in teams:
        team_sips = sips_by_team.get(team.id)
        if not team_sips:
            team_results.append(TeamHoleResult(team, None, None))
            continue

        average = sum(team_sips) / len(team_sips)
        team_results.append(TeamHoleResult(team, average, average - hole.par))
        if lowest_average is None or average < lowest_average:
            lowest_average = average
            winning_team = team

    return HoleResult(hole=hole, team_results=team_results, winning_team=winning_team)


def compute_overall_standings(
    holes: Sequence[Any],
    teams: Sequence[Any],
    players: Sequence[Any],
    scores: Sequence[Any],
) -> OverallStandings:
    """Compute every hole's result and the team with the most hole wins."""

    hole_results = [compute_hole_result(hole, teams, players, scores) for hole in holes]

    hole_wins: Dict[int, int] = {team.id: 0 for team in teams}
    for result in hole_results:
        if result.winning_team is not None:
            hole_wins[result.winning_team.id] += 1

    overall_winner = None
    max_wins = 0
    for team in teams:
        if hole_wins[team.id] > max_wins:
            max_wins = hole_wins[team.id]
            overall_winner = team

    return OverallStandings(
        hole_results=hole_results,
        overall_winner=overall_winner,
        hole_wins=hole_wins,
    )


__all__ = [
    "HoleResult",
    "OverallStandings",
    "TeamHoleResult",
    "compute_hole_result",
    "compute_overall_standings",
]

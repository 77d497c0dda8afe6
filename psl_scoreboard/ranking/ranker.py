from itertools import groupby
from typing import Iterable, List, Tuple

from psl_scoreboard.models.rank import RankRow
from psl_scoreboard.models.team import Team


def ranking_sort_key(team: Team) -> Tuple[int, str]:
    """Points descending, then display name ascending ignoring case."""
    return (-team.points, team.name.casefold())


def rank_teams(teams: Iterable[Team]) -> List[RankRow]:
    """Orders teams into league-table rows using competition ranking.

    Teams on equal points share a rank and the next group's rank skips ahead by
    the size of the tie, so points [10, 10, 7, 5, 5] rank as [1, 1, 3, 4, 4].
    Goal difference is not used to break ties.

    Each row holds a copy of its team; the input teams are never modified.
    """
    ordered = sorted(teams, key=ranking_sort_key)

    rows: List[RankRow] = []
    for _points, group in groupby(ordered, key=lambda t: t.points):
        # Everyone already placed is strictly ahead of this tie group
        rank = len(rows) + 1
        rows.extend(RankRow(rank=rank, team=team.model_copy()) for team in group)
    return rows

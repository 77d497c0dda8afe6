from typing import Iterable, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from psl_scoreboard.models.rank import RankRow

RANK_COLUMNS = ["Rank", "Team", "Points", "MP", "GF", "GA", "GD"]


def build_rank_table(rows: Iterable[RankRow], title: str = "PSL Scoreboard") -> Table:
    """Builds the league table shown in the console."""
    table = Table(title=title, header_style="bold yellow")
    for column in RANK_COLUMNS:
        # Only the team name is left aligned
        table.add_column(column, justify="left" if column == "Team" else "right")

    for row in rows:
        table.add_row(
            str(row.rank),
            row.name,
            str(row.points),
            str(row.matches_played),
            str(row.goals_for),
            str(row.goals_against),
            str(row.goal_difference),
        )
    return table


def print_ranking(
    rows: Iterable[RankRow], console: Optional[Console] = None
) -> None:
    console = console or Console()
    console.print(build_rank_table(rows))


def print_status(message: str, console: Optional[Console] = None) -> None:
    """Shows a one-line status message, like the status bar of a window."""
    console = console or Console()
    console.print(Panel(message, expand=False))

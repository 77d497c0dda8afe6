from pathlib import Path
from typing import Iterable, Union

from loguru import logger

from psl_scoreboard.models.rank import RankRow

# Field order and labels are relied on by consumers of exported files
EXPORT_LINE_FORMAT = "{rank}. {name} — {points} pts (GF:{goals_for} GA:{goals_against} GD:{goal_difference})"


def format_rank_row(row: RankRow) -> str:
    return EXPORT_LINE_FORMAT.format(
        rank=row.rank,
        name=row.name,
        points=row.points,
        goals_for=row.goals_for,
        goals_against=row.goals_against,
        goal_difference=row.goal_difference,
    )


def render_ranking(rows: Iterable[RankRow]) -> str:
    """One export line per ranked team, each ending in a newline."""
    return "".join(f"{format_rank_row(row)}\n" for row in rows)


def export_ranking(
    rows: Iterable[RankRow], path: Union[str, Path], encoding: str = "utf-8"
) -> Path:
    """Writes the ranking to a plain text file and returns its path.

    OSError is left to the caller, which decides how to report it.
    """
    output_path = Path(path)
    rows = list(rows)
    content = render_ranking(rows)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    # newline="" keeps "\n" line endings on every platform
    with open(output_path, "w", encoding=encoding, newline="") as f:
        f.write(content)
    logger.debug(f"Wrote {len(rows)} ranking lines to {output_path}")
    return output_path

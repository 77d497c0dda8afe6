import re
from typing import Dict, Iterable, List, Optional

from loguru import logger

from psl_scoreboard.models.data_models import BatchResult
from psl_scoreboard.models.rank import RankRow
from psl_scoreboard.models.team import Team
from psl_scoreboard.parsing.line_parser import is_blank, parse_line
from psl_scoreboard.ranking.ranker import rank_teams


LINE_BREAK = re.compile(r"\r?\n")


class LeagueError(Exception):
    """Custom exception for league-related errors."""

    pass


class InvalidTeamNameError(LeagueError, ValueError):
    """Exception raised when a team name is empty after trimming."""

    pass


def normalize_team_key(name: str) -> str:
    """Lookup key for a team name: trimmed and case-folded."""
    return name.strip().casefold()


class League:
    """Owns every team record and applies match results to them.

    Not safe for concurrent mutation; callers serialize writes and reads.
    """

    def __init__(self):
        # Key: normalized name, Value: team record holding the first-seen display name
        self._teams: Dict[str, Team] = {}

    def __len__(self) -> int:
        return len(self._teams)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and normalize_team_key(name) in self._teams

    def ensure_team(self, name: str) -> bool:
        """Creates a team record for name unless one already exists.

        Returns True when a record was created.
        """
        if name is None or not name.strip():
            raise InvalidTeamNameError(f"Team name must not be blank: {name!r}")

        key = normalize_team_key(name)
        if key in self._teams:
            return False

        self._teams[key] = Team(name=name.strip())
        logger.debug(f"Added team '{name.strip()}'")
        return True

    def clear(self) -> None:
        """Removes every team record."""
        count = len(self._teams)
        self._teams.clear()
        logger.info(f"League cleared ({count} teams removed).")

    def seed_teams(self, names: Iterable[str]) -> int:
        """Ensures a record exists for each name and returns how many were new.

        Blank names are skipped.
        """
        created = 0
        for name in names:
            if is_blank(name):
                logger.warning(f"Skipping blank team name while seeding: {name!r}")
                continue
            if self.ensure_team(name):
                created += 1
        logger.info(f"Seeded {created} new teams ({len(self._teams)} total).")
        return created

    def process_line(self, line: Optional[str]) -> bool:
        """Applies one result line such as "Pirates 1, Chiefs 2".

        Returns False, leaving the league untouched, when the line cannot be parsed.
        A line naming one team on both sides records both perspectives on that team.
        """
        event = parse_line(line)
        if event is None:
            return False

        self.ensure_team(event.team_a)
        self.ensure_team(event.team_b)

        team_a = self._teams[normalize_team_key(event.team_a)]
        team_b = self._teams[normalize_team_key(event.team_b)]
        team_a.apply_match_result(event.goals_a, event.goals_b)
        team_b.apply_match_result(event.goals_b, event.goals_a)
        logger.debug(f"Applied result: {event}")
        return True

    def process_lines(self, lines: Iterable[Optional[str]]) -> BatchResult:
        """Applies every line in order; bad lines are counted, never fatal."""
        applied = failed = skipped = 0
        for line in lines:
            if is_blank(line):
                skipped += 1
                continue
            if self.process_line(line):
                applied += 1
            else:
                failed += 1
                logger.warning(f"Could not parse result line: {line!r}")

        result = BatchResult(applied=applied, failed=failed, skipped=skipped)
        logger.info(result.summary)
        return result

    def process_text(self, text: Optional[str]) -> BatchResult:
        """Splits pasted or loaded text into lines and applies them."""
        if not text:
            return self.process_lines([])
        # Trailing line breaks do not produce extra blank lines
        return self.process_lines(LINE_BREAK.split(text.rstrip("\r\n")))

    def get_ranking(self) -> List[RankRow]:
        """Freshly computed league table for the current state."""
        return rank_teams(self._teams.values())

    def get_teams(self) -> List[Team]:
        """Copies of every team record, in the order they were first seen."""
        return [team.model_copy() for team in self._teams.values()]

    def get_team(self, name: str) -> Optional[Team]:
        """Copy of the record for name, looked up case-insensitively."""
        team = self._teams.get(normalize_team_key(name))
        return team.model_copy() if team is not None else None

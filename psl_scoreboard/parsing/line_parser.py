import re
from typing import Optional

from loguru import logger

from psl_scoreboard.models.match import MatchEvent

# "<Team A> <int>, <Team B> <int>", anchored to the whole line.
# Names are the shortest run before the last whitespace-integer pair and never
# span a line terminator. Whitespace is ASCII only.
TEAM_NAME = r"[^\r\n\x85\u2028\u2029]+?"
LINE_PATTERN = re.compile(
    rf"\s*(?P<team_a>{TEAM_NAME})\s+(?P<goals_a>[0-9]+)\s*,\s*(?P<team_b>{TEAM_NAME})\s+(?P<goals_b>[0-9]+)\s*",
    re.ASCII,
)
ASCII_WHITESPACE = " \t\n\r\f\v"


def is_blank(line: Optional[str]) -> bool:
    """True for lines callers should skip rather than count as failures."""
    return line is None or not line.strip()


def parse_line(line: Optional[str]) -> Optional[MatchEvent]:
    """Parses one match-result line such as "Pirates 1, Chiefs 2".

    Returns None when the line does not match the expected shape. Never raises
    on malformed input.
    """
    if line is None:
        return None

    match = LINE_PATTERN.fullmatch(line)
    if not match:
        logger.debug(f"Line does not match result pattern: {line!r}")
        return None

    team_a = match.group("team_a").strip(ASCII_WHITESPACE)
    team_b = match.group("team_b").strip(ASCII_WHITESPACE)
    if not team_a or not team_b:
        logger.debug(f"Line has a blank team name: {line!r}")
        return None

    try:
        return MatchEvent(
            team_a=team_a,
            goals_a=int(match.group("goals_a")),
            team_b=team_b,
            goals_b=int(match.group("goals_b")),
        )
    except ValueError as e:
        # Covers ValidationError and int() refusing digit strings past the conversion limit
        logger.debug(f"Could not build match event from {line!r}: {e}")
        return None

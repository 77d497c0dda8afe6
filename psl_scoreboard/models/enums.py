from enum import Enum


class MatchOutcome(str, Enum):
    WIN = "WIN"
    DRAW = "DRAW"
    LOSS = "LOSS"

    @property
    def points(self) -> int:
        """League points awarded for this outcome (3 for a win, 1 for a draw)."""
        return OUTCOME_POINTS[self]

    @classmethod
    def from_score(cls, goals_for: int, goals_against: int) -> "MatchOutcome":
        """Outcome from one team's perspective."""
        if goals_for > goals_against:
            return cls.WIN
        if goals_for == goals_against:
            return cls.DRAW
        return cls.LOSS


OUTCOME_POINTS = {
    MatchOutcome.WIN: 3,
    MatchOutcome.DRAW: 1,
    MatchOutcome.LOSS: 0,
}

# psl_scoreboard/models/team.py
from pydantic import BaseModel, ConfigDict, Field, computed_field

from .enums import MatchOutcome


class Team(BaseModel):
    """Represents one team's accumulated league statistics."""

    model_config = ConfigDict(str_strip_whitespace=True)

    # Display name, trimmed on creation and never changed afterwards
    name: str = Field(..., min_length=1, frozen=True)
    points: int = Field(0, ge=0)
    goals_for: int = Field(0, ge=0)
    goals_against: int = Field(0, ge=0)
    matches_played: int = Field(0, ge=0)

    @computed_field  # type: ignore[misc]
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against

    def apply_match_result(self, goals_for: int, goals_against: int) -> MatchOutcome:
        """Records one match from this team's perspective and returns its outcome.

        Calling this twice records two matches.
        """
        if goals_for < 0 or goals_against < 0:
            raise ValueError(
                f"Goal counts must be non-negative, got {goals_for}-{goals_against}"
            )
        outcome = MatchOutcome.from_score(goals_for, goals_against)
        self.matches_played += 1
        self.goals_for += goals_for
        self.goals_against += goals_against
        self.points += outcome.points
        return outcome

    def __str__(self) -> str:
        return (
            f"{self.name} — {self.points} pts "
            f"(GF:{self.goals_for} GA:{self.goals_against} GD:{self.goal_difference})"
        )

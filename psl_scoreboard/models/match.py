from pydantic import BaseModel, ConfigDict, Field


class MatchEvent(BaseModel):
    """A single parsed result between two opposing teams."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)  # Make instances immutable

    team_a: str = Field(..., min_length=1)
    goals_a: int = Field(..., ge=0)
    team_b: str = Field(..., min_length=1)
    goals_b: int = Field(..., ge=0)

    def __str__(self) -> str:
        return f"{self.team_a} {self.goals_a}, {self.team_b} {self.goals_b}"

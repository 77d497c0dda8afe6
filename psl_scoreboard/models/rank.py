from pydantic import BaseModel, ConfigDict, Field, computed_field

from .team import Team


class RankRow(BaseModel):
    """One row of the league table, pairing a rank with a snapshot of a team.

    The team is a copy taken when the ranking was computed, so a row never
    tracks or alters the league it came from.
    """

    model_config = ConfigDict(frozen=True)

    rank: int = Field(..., ge=1)
    team: Team

    @computed_field  # type: ignore[misc]
    @property
    def name(self) -> str:
        return self.team.name

    @computed_field  # type: ignore[misc]
    @property
    def points(self) -> int:
        return self.team.points

    @computed_field  # type: ignore[misc]
    @property
    def matches_played(self) -> int:
        return self.team.matches_played

    @computed_field  # type: ignore[misc]
    @property
    def goals_for(self) -> int:
        return self.team.goals_for

    @computed_field  # type: ignore[misc]
    @property
    def goals_against(self) -> int:
        return self.team.goals_against

    @computed_field  # type: ignore[misc]
    @property
    def goal_difference(self) -> int:
        return self.team.goal_difference

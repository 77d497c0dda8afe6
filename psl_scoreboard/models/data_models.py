from pydantic import BaseModel, ConfigDict, computed_field


class BatchResult(BaseModel):
    """Counts for one batch of match-result lines."""

    model_config = ConfigDict(frozen=True)  # Make instances immutable

    applied: int = 0
    failed: int = 0
    skipped: int = 0  # Blank lines, neither applied nor failed

    @computed_field  # type: ignore[misc]
    @property
    def summary(self) -> str:
        return f"Processed: {self.applied} lines applied, {self.failed} failed."

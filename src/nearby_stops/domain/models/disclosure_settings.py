"""Disclosure thresholds domain model."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DisclosureSettings(BaseModel):
    """Thresholds for progressive disclosure."""

    model_config = ConfigDict(frozen=True)

    initial_visible: int = Field(default=2, ge=1)
    # Exclusive bound: at max_incremental_visible - 1 the next "show more"
    # expands fully
    max_incremental_visible: int = Field(default=5, ge=2)

    @model_validator(mode="after")
    def validate_thresholds(self) -> "DisclosureSettings":
        """Validate the incremental bound lies above the initial count."""
        if self.max_incremental_visible <= self.initial_visible:
            raise ValueError("max_incremental_visible must be greater than initial_visible")
        return self

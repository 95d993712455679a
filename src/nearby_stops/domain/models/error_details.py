"""Error details domain model."""

from pydantic import BaseModel, ConfigDict

from nearby_stops.domain.models.errors import NearbyStopsError


class ErrorDetails(BaseModel):
    """A failure as shown to the view layer."""

    model_config = ConfigDict(frozen=True)

    kind: str
    reason: str

    @classmethod
    def from_error(cls, error: NearbyStopsError) -> "ErrorDetails":
        """Build details from a collaborator failure."""
        return cls(kind=error.kind, reason=str(error) or error.kind.replace("_", " "))

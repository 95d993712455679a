"""Stop record domain model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from nearby_stops.domain.models.coordinate import Coordinate


class StopRecord(BaseModel):
    """A transit stop as delivered by the stop feed.

    Field aliases are the feed's field names and must not change:
    ``stopId``, ``stopName``, ``address``, ``latitude``, ``longitude``.
    Two records with the same ``stop_id`` are the same stop.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    stop_id: str = Field(alias="stopId", min_length=1)
    stop_name: str = Field(alias="stopName")
    address: str = ""
    latitude: float = Field(ge=-90.0, le=90.0, allow_inf_nan=False)
    longitude: float = Field(ge=-180.0, le=180.0, allow_inf_nan=False)

    @field_validator("stop_id", mode="before")
    @classmethod
    def normalize_stop_id(cls, v: Any) -> Any:
        """Accept numeric identifiers, which some feeds use for stop codes."""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return str(int(v)) if float(v).is_integer() else str(v)
        return v

    @field_validator("address", mode="before")
    @classmethod
    def normalize_address(cls, v: Any) -> Any:
        """Treat a missing address as empty text."""
        return "" if v is None else v

    @property
    def coordinate(self) -> Coordinate:
        """Coordinate of the stop."""
        return Coordinate(latitude=self.latitude, longitude=self.longitude)

    def to_feed_dict(self) -> dict[str, Any]:
        """Serialize using the feed's field names."""
        return self.model_dump(by_alias=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StopRecord):
            return NotImplemented
        return self.stop_id == other.stop_id

    def __hash__(self) -> int:
        return hash(self.stop_id)

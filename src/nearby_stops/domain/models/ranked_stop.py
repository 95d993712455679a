"""Ranked stop domain model."""

from dataclasses import dataclass

from nearby_stops.domain.models.distance_unit import KM_FIXED_2DP, DistanceUnit, format_distance
from nearby_stops.domain.models.stop_record import StopRecord


@dataclass(frozen=True)
class RankedStop:
    """A stop annotated with its distance from the ranking origin.

    ``distance`` is whole meters for ``meters_rounded`` and kilometers rounded
    to two decimals for ``km_fixed_2dp``.
    """

    stop: StopRecord
    distance: float
    unit: DistanceUnit

    @property
    def stop_id(self) -> str:
        return self.stop.stop_id

    @property
    def stop_name(self) -> str:
        return self.stop.stop_name

    @property
    def address(self) -> str:
        return self.stop.address

    @property
    def formatted_distance(self) -> str:
        """Distance as text without unit, e.g. ``"152"`` or ``"03.42"``."""
        return format_distance(self.distance, self.unit)

    @property
    def distance_label(self) -> str:
        """Distance as text with unit, e.g. ``"152 m"`` or ``"03.42 km"``."""
        suffix = "km" if self.unit == KM_FIXED_2DP else "m"
        return f"{self.formatted_distance} {suffix}"

    def to_feed_dict(self) -> dict[str, object]:
        """Serialize as the feed record plus a ``distance`` field."""
        return {**self.stop.to_feed_dict(), "distance": self.distance}

"""Domain layer - core models and ports."""

from nearby_stops.domain.models import (
    Coordinate,
    RankedStop,
    StopRecord,
)
from nearby_stops.domain.ports import (
    LocationProvider,
    StopFeed,
)

__all__ = [
    "Coordinate",
    "LocationProvider",
    "RankedStop",
    "StopFeed",
    "StopRecord",
]

"""Location provider port."""

from typing import Protocol

from nearby_stops.domain.models.coordinate import Coordinate


class LocationProvider(Protocol):
    """Port for sampling the user's current position."""

    async def get_current_coordinate(self) -> Coordinate:
        """Return one position sample.

        Raises:
            PermissionDenied: Location access was refused.
            PositionUnavailable: No position could be determined.
        """
        ...

"""Location provider backed by a configured position."""

import logging

from pydantic import ValidationError

from nearby_stops.domain.models.coordinate import Coordinate
from nearby_stops.domain.models.errors import PermissionDenied, PositionUnavailable
from nearby_stops.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)


class ConfiguredLocationProvider(LocationProvider):
    """Returns a fixed position, e.g. from the command line or configuration.

    The position can be replaced with ``move_to`` so that a later refresh
    samples a new origin.
    """

    def __init__(
        self,
        latitude: float | None,
        longitude: float | None,
        permission_granted: bool = True,
    ) -> None:
        """Initialize the provider.

        Args:
            latitude: Latitude in degrees, or None if unknown.
            longitude: Longitude in degrees, or None if unknown.
            permission_granted: Whether the position may be handed out.
        """
        self.latitude = latitude
        self.longitude = longitude
        self.permission_granted = permission_granted

    def move_to(self, latitude: float, longitude: float) -> None:
        self.latitude = latitude
        self.longitude = longitude

    async def get_current_coordinate(self) -> Coordinate:
        """Return the configured position."""
        if not self.permission_granted:
            raise PermissionDenied("Permission to access location was denied")
        if self.latitude is None or self.longitude is None:
            raise PositionUnavailable("No position configured")
        try:
            return Coordinate(latitude=self.latitude, longitude=self.longitude)
        except ValidationError as e:
            logger.warning(f"Configured position is invalid: {self.latitude}, {self.longitude}")
            raise PositionUnavailable(
                f"Position out of range: {self.latitude}, {self.longitude}"
            ) from e

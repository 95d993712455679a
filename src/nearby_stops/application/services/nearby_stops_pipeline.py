"""Fetch-position, fetch-stops, rank pipeline."""

import logging

from nearby_stops.application.services.proximity_ranker import rank_stops
from nearby_stops.domain.models.distance_unit import METERS_ROUNDED, DistanceUnit
from nearby_stops.domain.models.errors import NearbyStopsError
from nearby_stops.domain.models.refresh_outcome import RefreshOutcome
from nearby_stops.domain.ports import LocationProvider, StopFeed

logger = logging.getLogger(__name__)


class NearbyStopsPipeline:
    """Runs the collaborator calls in order and ranks the result.

    Each stage either hands its value to the next stage or stops the run
    with a failed ``RefreshOutcome``. Nothing is ranked unless both the
    position and the stop collection were obtained.
    """

    def __init__(
        self,
        location_provider: LocationProvider,
        stop_feed: StopFeed,
        unit: DistanceUnit = METERS_ROUNDED,
    ) -> None:
        """Initialize the pipeline.

        Args:
            location_provider: Source of the user's position.
            stop_feed: Source of the stop records.
            unit: Distance unit mode for ranking.
        """
        self.location_provider = location_provider
        self.stop_feed = stop_feed
        self.unit = unit

    async def run(self) -> RefreshOutcome:
        """Sample the position, fetch the stops and rank them."""
        try:
            origin = await self.location_provider.get_current_coordinate()
        except NearbyStopsError as e:
            logger.warning(f"Could not get current position: {str(e) or e.kind}")
            return RefreshOutcome.failure("location", e)

        try:
            stops = await self.stop_feed.fetch_all_stops()
        except NearbyStopsError as e:
            logger.warning(f"Could not fetch stops: {str(e) or e.kind}")
            return RefreshOutcome.failure("feed", e)

        stops = list(stops) if stops else []
        ranked = rank_stops(stops, origin, self.unit)
        return RefreshOutcome.success(ranked=ranked, stops=stops)

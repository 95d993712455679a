"""Stop feed port."""

from typing import Protocol

from nearby_stops.domain.models.stop_record import StopRecord


class StopFeed(Protocol):
    """Port for retrieving the current set of stop records."""

    async def fetch_all_stops(self) -> list[StopRecord] | None:
        """Return every known stop, or None when the feed holds no data.

        Raises:
            FeedUnavailable: The feed could not be reached.
        """
        ...

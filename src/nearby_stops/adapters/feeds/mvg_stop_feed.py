"""MVG station list stop feed adapter."""

import logging
from typing import Any

from mvg import MvgApi

from nearby_stops.adapters.api_request_logger import log_api_request
from nearby_stops.adapters.feeds.stop_record_parser import parse_stop_records
from nearby_stops.domain.models.errors import FeedUnavailable
from nearby_stops.domain.models.stop_record import StopRecord
from nearby_stops.domain.ports.stop_feed import StopFeed

logger = logging.getLogger(__name__)


def _station_to_record(station: dict[str, Any]) -> dict[str, Any]:
    """Map an MVG station dict to the feed's field names."""
    return {
        "stopId": station.get("id"),
        "stopName": station.get("name"),
        "address": station.get("place", ""),
        "latitude": station.get("latitude"),
        "longitude": station.get("longitude"),
    }


class MvgStopFeed(StopFeed):
    """Uses the MVG station list (Munich public transport) as stop feed."""

    async def fetch_all_stops(self) -> list[StopRecord] | None:
        """Fetch every MVG station."""
        log_api_request("CALL", "MvgApi.stations_async")
        try:
            stations = await MvgApi.stations_async()
        except Exception as e:
            raise FeedUnavailable(f"MVG station list unavailable: {e}") from e

        if not stations:
            return None
        return parse_stop_records(
            [_station_to_record(s) for s in stations if isinstance(s, dict)]
        )

"""Local JSON file stop feed adapter."""

import asyncio
import json
import logging
from pathlib import Path

from nearby_stops.adapters.feeds.stop_record_parser import parse_stop_records
from nearby_stops.domain.models.errors import FeedUnavailable
from nearby_stops.domain.models.stop_record import StopRecord
from nearby_stops.domain.ports.stop_feed import StopFeed

logger = logging.getLogger(__name__)


class StaticStopFeed(StopFeed):
    """Reads stop records from a JSON file in the same shape as the HTTP feed."""

    def __init__(self, path: str | Path) -> None:
        """Initialize with the path of the JSON file."""
        self.path = Path(path)

    def _load(self) -> list[StopRecord] | None:
        if not self.path.exists():
            raise FeedUnavailable(f"Stop file not found: {self.path}")
        try:
            with open(self.path, encoding="utf-8") as f:
                payload = json.load(f)
            logger.debug(f"Loaded stop file {self.path}")
            return parse_stop_records(payload)
        except (OSError, ValueError) as e:
            raise FeedUnavailable(f"Could not read stop file {self.path}: {e}") from e

    async def fetch_all_stops(self) -> list[StopRecord] | None:
        """Load every stop from the file."""
        return await asyncio.to_thread(self._load)

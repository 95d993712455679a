"""JSON-over-HTTP stop feed adapter.

Works with any endpoint returning the stop records as JSON, in particular the
REST export of a Firebase Realtime Database node
(``https://<db>.firebaseio.com/busStops.json``).
"""

import asyncio
import logging
from typing import TYPE_CHECKING

import aiohttp

from nearby_stops.adapters.api_request_logger import log_api_request
from nearby_stops.adapters.feeds.stop_record_parser import parse_stop_records
from nearby_stops.domain.models.errors import FeedUnavailable
from nearby_stops.domain.models.stop_record import StopRecord
from nearby_stops.domain.ports.stop_feed import StopFeed

if TYPE_CHECKING:
    from aiohttp import ClientSession

logger = logging.getLogger(__name__)

HEADERS = {"accept": "application/json"}


class HttpStopFeed(StopFeed):
    """Fetches stop records from a JSON endpoint."""

    def __init__(
        self,
        url: str,
        session: "ClientSession",
        timeout_seconds: float = 10,
    ) -> None:
        """Initialize the feed.

        Args:
            url: Endpoint returning the stop records.
            session: Shared aiohttp session.
            timeout_seconds: Total request timeout.
        """
        self.url = url
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch_all_stops(self) -> list[StopRecord] | None:
        """Fetch and parse every stop from the endpoint."""
        log_api_request("GET", self.url, headers=HEADERS, timeout=self._timeout.total)
        try:
            async with self._session.get(
                self.url, headers=HEADERS, timeout=self._timeout
            ) as response:
                if response.status != 200:
                    response_text = await response.text()
                    logger.warning(
                        f"Stop feed returned status {response.status}: {response_text[:200]}"
                    )
                    raise FeedUnavailable(f"Stop feed returned HTTP {response.status}")
                payload = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FeedUnavailable(f"Stop feed unreachable: {str(e) or type(e).__name__}") from e
        except ValueError as e:
            raise FeedUnavailable(f"Stop feed returned invalid JSON: {e}") from e

        try:
            return parse_stop_records(payload)
        except ValueError as e:
            raise FeedUnavailable(str(e)) from e

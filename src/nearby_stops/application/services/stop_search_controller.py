"""Controller behind the stop search view."""

import logging

from nearby_stops.application.services.text_filter import filter_stops
from nearby_stops.domain.models.error_details import ErrorDetails
from nearby_stops.domain.models.errors import NearbyStopsError
from nearby_stops.domain.models.intents import Intent, QueryChanged, Refresh, SelectStop
from nearby_stops.domain.models.nearby_stops_view import StopSearchView, ViewStatus
from nearby_stops.domain.models.stop_record import StopRecord
from nearby_stops.domain.ports import StopFeed

logger = logging.getLogger(__name__)


class StopSearchController:
    """Filters the full stop collection by the current search text."""

    def __init__(self, stop_feed: StopFeed) -> None:
        """Initialize with the stop feed to search."""
        self.stop_feed = stop_feed
        self._stops: list[StopRecord] = []
        self._results: list[StopRecord] = []
        self._query = ""
        self._generation = 0
        self._in_flight = 0
        self._loaded = False
        self._error: ErrorDetails | None = None
        self._selected: StopRecord | None = None

    @property
    def stops(self) -> list[StopRecord]:
        return list(self._stops)

    @property
    def query(self) -> str:
        return self._query

    async def load(self) -> bool:
        """Fetch the stop collection; keeps previous stops on failure.

        Returns:
            True if the fetched collection was published.
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            stops = await self.stop_feed.fetch_all_stops()
        except NearbyStopsError as e:
            if generation == self._generation:
                logger.warning(f"Could not fetch stops for search: {str(e) or e.kind}")
                self._error = ErrorDetails.from_error(e)
            return False
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug(f"Discarding superseded stop load {generation}")
            return False

        self._stops = list(stops) if stops else []
        self._loaded = True
        self._error = None
        self._results = filter_stops(self._stops, self._query)
        return True

    def change_query(self, text: str) -> list[StopRecord]:
        """Re-filter synchronously for the new search text."""
        self._query = text
        self._results = filter_stops(self._stops, text)
        logger.debug(f"Query {text!r} matched {len(self._results)} of {len(self._stops)} stops")
        return list(self._results)

    def select_stop(self, stop_id: str) -> StopRecord | None:
        self._selected = next((s for s in self._stops if s.stop_id == stop_id), None)
        return self._selected

    async def handle(self, intent: Intent) -> StopSearchView:
        """Apply a user intent and return the view to render."""
        if isinstance(intent, QueryChanged):
            self.change_query(intent.text)
        elif isinstance(intent, SelectStop):
            self.select_stop(intent.stop_id)
        elif isinstance(intent, Refresh):
            await self.load()
        return self.view()

    def _status(self) -> ViewStatus:
        if not self._loaded:
            return "unavailable" if self._error is not None and not self._in_flight else "loading"
        if not self._stops:
            return "no_stops"
        return "ready"

    def view(self) -> StopSearchView:
        """Current view model."""
        return StopSearchView(
            results=list(self._results),
            query=self._query,
            is_loading=self._in_flight > 0,
            status=self._status(),
            error=self._error,
            selected=self._selected,
        )

"""Controller behind the nearby stops view."""

import logging

from nearby_stops.application.services.disclosure_controller import DisclosureController
from nearby_stops.application.services.nearby_stops_pipeline import NearbyStopsPipeline
from nearby_stops.domain.models.disclosure_settings import DisclosureSettings
from nearby_stops.domain.models.error_details import ErrorDetails
from nearby_stops.domain.models.intents import (
    Collapse,
    Intent,
    QueryChanged,
    Refresh,
    SelectStop,
    ShowMore,
)
from nearby_stops.domain.models.nearby_stops_view import NearbyStopsView, ViewStatus
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.refresh_outcome import RefreshOutcome
from nearby_stops.domain.models.stop_record import StopRecord

logger = logging.getLogger(__name__)


class NearbyStopsController:
    """Holds the ranked stops and disclosure state for one view.

    ``refresh`` may be awaited again while a previous refresh is still in
    flight; only the latest one is allowed to publish its result.
    """

    def __init__(
        self,
        pipeline: NearbyStopsPipeline,
        settings: DisclosureSettings | None = None,
    ) -> None:
        """Initialize the controller.

        Args:
            pipeline: Pipeline producing ranked stops.
            settings: Disclosure thresholds.
        """
        self.pipeline = pipeline
        self.disclosure = DisclosureController(settings)
        self._generation = 0
        self._in_flight = 0
        self._loaded = False
        self._error: ErrorDetails | None = None
        self._selected: StopRecord | None = None

    @property
    def ranked(self) -> list[RankedStop]:
        return self.disclosure.items

    @property
    def is_loading(self) -> bool:
        return self._in_flight > 0

    async def refresh(self) -> RefreshOutcome:
        """Rerun the pipeline and, unless superseded, publish its result.

        On failure the previous ranked stops and disclosure state stay as
        they were and the error is reported through the view.
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            outcome = await self.pipeline.run()
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug(f"Discarding superseded refresh {generation} (latest {self._generation})")
            return RefreshOutcome(
                ranked=outcome.ranked,
                stops=outcome.stops,
                error=outcome.error,
                stage=outcome.stage,
                superseded=True,
            )

        if outcome.error is not None:
            self._error = ErrorDetails.from_error(outcome.error)
            return outcome

        ranked = outcome.ranked or []
        self.disclosure.reset(ranked)
        self._loaded = True
        self._error = None
        if self._selected is not None and self._selected not in {r.stop for r in ranked}:
            self._selected = None
        logger.info(f"Refreshed nearby stops: {len(ranked)} ranked")
        return outcome

    def show_more(self) -> None:
        self.disclosure.show_more()

    def collapse(self) -> None:
        self.disclosure.collapse()

    def select_stop(self, stop_id: str) -> StopRecord | None:
        """Select a ranked stop by id; unknown ids clear the selection."""
        self._selected = next(
            (r.stop for r in self.disclosure.items if r.stop_id == stop_id), None
        )
        if self._selected is None:
            logger.debug(f"Selected stop {stop_id} is not among the ranked stops")
        return self._selected

    async def handle(self, intent: Intent) -> NearbyStopsView:
        """Apply a user intent and return the view to render."""
        if isinstance(intent, ShowMore):
            self.show_more()
        elif isinstance(intent, Collapse):
            self.collapse()
        elif isinstance(intent, Refresh):
            await self.refresh()
        elif isinstance(intent, SelectStop):
            self.select_stop(intent.stop_id)
        elif isinstance(intent, QueryChanged):
            logger.debug("Query changes are handled by the search view")
        return self.view()

    def _status(self) -> ViewStatus:
        if not self._loaded:
            return "unavailable" if self._error is not None and not self.is_loading else "loading"
        if self.disclosure.total == 0:
            return "no_stops"
        return "ready"

    def view(self) -> NearbyStopsView:
        """Current view model."""
        return NearbyStopsView(
            visible=self.disclosure.visible,
            total=self.disclosure.total,
            can_show_more=self.disclosure.can_show_more,
            can_collapse=self.disclosure.can_collapse,
            is_loading=self.is_loading,
            status=self._status(),
            error=self._error,
            selected=self._selected,
        )

"""Plain-text rendering of the nearby and search views."""

from nearby_stops.domain.models.nearby_stops_view import NearbyStopsView, StopSearchView
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.stop_record import StopRecord

STATUS_MESSAGES = {
    "loading": "Loading nearest stops...",
    "no_stops": "No stops found",
    "unavailable": "Nearby stops are unavailable",
}


class StopListFormatter:
    """Formats view models as lines of text."""

    def format_ranked_stop(self, ranked: RankedStop) -> str:
        """One stop as ``name - address (152 m away)``."""
        return f"{self._format_stop(ranked.stop)} ({ranked.distance_label} away)"

    def format_stop(self, stop: StopRecord) -> str:
        return self._format_stop(stop)

    @staticmethod
    def _format_stop(stop: StopRecord) -> str:
        if stop.address:
            return f"{stop.stop_name} - {stop.address}"
        return stop.stop_name

    def format_error(self, view: NearbyStopsView | StopSearchView) -> str | None:
        if view.error is None:
            return None
        return f"! {view.error.reason}"

    def format_nearby(self, view: NearbyStopsView) -> list[str]:
        """Lines for the nearby stops view, including the offered controls."""
        lines = ["Nearby Stops"]
        error = self.format_error(view)
        if error:
            lines.append(error)
        if view.status != "ready":
            lines.append(STATUS_MESSAGES[view.status])
            return lines

        for position, ranked in enumerate(view.visible, start=1):
            lines.append(f"{position:>3}. [{ranked.stop_id}] {self.format_ranked_stop(ranked)}")

        controls = []
        if view.can_show_more:
            controls.append("[m] Show More")
            controls.append("[r] Refresh")
        if view.can_collapse:
            controls.append("[c] Collapse")
        if not controls:
            controls.append("[r] Refresh")
        lines.append(f"Showing {len(view.visible)} of {view.total}   " + "  ".join(controls))
        return lines

    def format_search(self, view: StopSearchView) -> list[str]:
        """Lines for the search view."""
        lines = [f"Bus Stops matching '{view.query}'" if view.query else "Bus Stops"]
        error = self.format_error(view)
        if error:
            lines.append(error)
        if view.status != "ready":
            lines.append(STATUS_MESSAGES[view.status])
            return lines
        if not view.results:
            lines.append("No stops found")
            return lines
        for stop in view.results:
            lines.append(f"  [{stop.stop_id}] {self.format_stop(stop)}")
        return lines

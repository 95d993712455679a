"""Application services (use cases) for nearby stops."""

from nearby_stops.application.services.disclosure_controller import DisclosureController
from nearby_stops.application.services.geodistance import distance, haversine_km
from nearby_stops.application.services.nearby_stops_controller import NearbyStopsController
from nearby_stops.application.services.nearby_stops_pipeline import NearbyStopsPipeline
from nearby_stops.application.services.proximity_ranker import rank_stops
from nearby_stops.application.services.stop_search_controller import StopSearchController
from nearby_stops.application.services.text_filter import filter_stops, matches_query

__all__ = [
    "DisclosureController",
    "NearbyStopsController",
    "NearbyStopsPipeline",
    "StopSearchController",
    "distance",
    "filter_stops",
    "haversine_km",
    "matches_query",
    "rank_stops",
]

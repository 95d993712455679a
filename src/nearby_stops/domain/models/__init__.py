"""Domain models for nearby stops."""

from nearby_stops.domain.models.coordinate import Coordinate
from nearby_stops.domain.models.disclosure_settings import DisclosureSettings
from nearby_stops.domain.models.disclosure_state import Collapsed, DisclosureState, Expanded
from nearby_stops.domain.models.distance_unit import (
    DISTANCE_UNITS,
    KM_FIXED_2DP,
    METERS_ROUNDED,
    DistanceUnit,
    format_distance,
)
from nearby_stops.domain.models.error_details import ErrorDetails
from nearby_stops.domain.models.errors import (
    FeedUnavailable,
    InputUnavailable,
    NearbyStopsError,
    PermissionDenied,
    PositionUnavailable,
)
from nearby_stops.domain.models.intents import (
    Collapse,
    Intent,
    QueryChanged,
    Refresh,
    SelectStop,
    ShowMore,
)
from nearby_stops.domain.models.nearby_stops_view import (
    NearbyStopsView,
    StopSearchView,
    ViewStatus,
)
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.refresh_outcome import PipelineStage, RefreshOutcome
from nearby_stops.domain.models.stop_record import StopRecord

__all__ = [
    "DISTANCE_UNITS",
    "KM_FIXED_2DP",
    "METERS_ROUNDED",
    "Collapse",
    "Collapsed",
    "Coordinate",
    "DisclosureSettings",
    "DisclosureState",
    "DistanceUnit",
    "ErrorDetails",
    "Expanded",
    "FeedUnavailable",
    "InputUnavailable",
    "Intent",
    "NearbyStopsError",
    "NearbyStopsView",
    "PermissionDenied",
    "PipelineStage",
    "PositionUnavailable",
    "QueryChanged",
    "RankedStop",
    "Refresh",
    "RefreshOutcome",
    "SelectStop",
    "ShowMore",
    "StopRecord",
    "StopSearchView",
    "ViewStatus",
    "format_distance",
]

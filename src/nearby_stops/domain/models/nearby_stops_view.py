"""View models handed to the view layer on every render."""

from dataclasses import dataclass, field
from typing import Literal

from nearby_stops.domain.models.error_details import ErrorDetails
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.stop_record import StopRecord

ViewStatus = Literal["loading", "ready", "no_stops", "unavailable"]


@dataclass(frozen=True)
class NearbyStopsView:
    """Disclosed slice of the ranked stops plus the controls to offer."""

    visible: list[RankedStop] = field(default_factory=list)
    total: int = 0
    can_show_more: bool = False
    can_collapse: bool = False
    is_loading: bool = False
    status: ViewStatus = "loading"
    error: ErrorDetails | None = None
    selected: StopRecord | None = None


@dataclass(frozen=True)
class StopSearchView:
    """Stops matching the current search text, in feed order."""

    results: list[StopRecord] = field(default_factory=list)
    query: str = ""
    is_loading: bool = False
    status: ViewStatus = "loading"
    error: ErrorDetails | None = None
    selected: StopRecord | None = None

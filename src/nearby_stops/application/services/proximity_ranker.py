"""Ranking of stops by distance from an origin."""

import logging
from collections.abc import Iterable

from nearby_stops.application.services.geodistance import distance
from nearby_stops.domain.models.coordinate import Coordinate
from nearby_stops.domain.models.distance_unit import METERS_ROUNDED, DistanceUnit
from nearby_stops.domain.models.ranked_stop import RankedStop
from nearby_stops.domain.models.stop_record import StopRecord

logger = logging.getLogger(__name__)


def rank_stops(
    stops: Iterable[StopRecord] | None,
    origin: Coordinate,
    unit: DistanceUnit = METERS_ROUNDED,
) -> list[RankedStop]:
    """Annotate every stop with its distance from origin, nearest first.

    The sort is stable, so stops at equal distance keep their input order.
    A missing collection ranks as empty.

    Args:
        stops: Stop records to rank, or None if the feed had no data.
        origin: Reference coordinate, normally the user's position.
        unit: Distance unit mode for the attached distances.

    Returns:
        A new list of ranked stops.
    """
    if stops is None:
        logger.info("No stops available to rank")
        return []

    ranked = [
        RankedStop(stop=stop, distance=distance(origin, stop.coordinate, unit), unit=unit)
        for stop in stops
    ]
    ranked.sort(key=lambda r: r.distance)
    logger.debug(f"Ranked {len(ranked)} stops from ({origin.latitude}, {origin.longitude})")
    return ranked

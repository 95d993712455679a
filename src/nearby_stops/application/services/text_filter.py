"""Free-text filtering of stops."""

from collections.abc import Iterable

from nearby_stops.domain.models.stop_record import StopRecord


def matches_query(stop: StopRecord, query: str) -> bool:
    """Check if query occurs in the stop name or address, ignoring case."""
    needle = query.casefold()
    return needle in stop.stop_name.casefold() or needle in stop.address.casefold()


def filter_stops(stops: Iterable[StopRecord] | None, query: str) -> list[StopRecord]:
    """Return stops whose name or address contains query, in input order.

    An empty query matches every stop.
    """
    if stops is None:
        return []
    if not query:
        return list(stops)
    return [stop for stop in stops if matches_query(stop, query)]

"""Tests for ranking and text filtering services."""

import pytest

from nearby_stops.application.services import filter_stops, matches_query, rank_stops
from nearby_stops.domain.models import (
    KM_FIXED_2DP,
    Coordinate,
    FeedUnavailable,
    NearbyStopsError,
    StopRecord,
)

ORIGIN = Coordinate(latitude=1.3000, longitude=103.8000)


class FakeStopFeed:
    """Fake stop feed returning canned stops or raising a canned error."""

    def __init__(
        self,
        stops: list[StopRecord] | None = None,
        error: NearbyStopsError | None = None,
    ) -> None:
        """Initialize with the stops to return or the error to raise."""
        self.stops = stops
        self.error = error
        self.calls = 0

    async def fetch_all_stops(self) -> list[StopRecord] | None:
        """Return the configured stops."""
        self.calls += 1
        if self.error is not None:
            raise self.error
        return None if self.stops is None else list(self.stops)


class FakeLocationProvider:
    """Fake location provider returning coordinates in sequence."""

    def __init__(
        self,
        coordinates: list[Coordinate] | None = None,
        error: NearbyStopsError | None = None,
    ) -> None:
        """Initialize with the coordinates to return or the error to raise."""
        self.coordinates = coordinates or [ORIGIN]
        self.error = error
        self.calls = 0

    async def get_current_coordinate(self) -> Coordinate:
        """Return the next coordinate, repeating the last one."""
        index = min(self.calls, len(self.coordinates) - 1)
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.coordinates[index]


def make_stop(
    stop_id: str, latitude: float, longitude: float, name: str = "", address: str = ""
) -> StopRecord:
    """Build a stop record using the feed's field names."""
    return StopRecord.model_validate(
        {
            "stopId": stop_id,
            "stopName": name or f"Stop {stop_id}",
            "address": address,
            "latitude": latitude,
            "longitude": longitude,
        }
    )


@pytest.fixture
def sample_stops() -> list[StopRecord]:
    """Stops around the origin, deliberately not in distance order."""
    return [
        make_stop("far", 1.3500, 103.8000, "Newton Circus", "Scotts Rd"),
        make_stop("near", 1.3010, 103.8010, "Orchard Stn", "Orchard Blvd"),
        make_stop("mid", 1.3000, 103.8100, "Botanic Gardens", "Cluny Rd"),
    ]


def test_rank_sorts_nearest_first(sample_stops: list[StopRecord]) -> None:
    """Given unordered stops, when ranked, then they come out nearest first."""
    ranked = rank_stops(sample_stops, ORIGIN)

    assert [r.stop_id for r in ranked] == ["near", "mid", "far"]
    assert ranked[0].distance == 157


def test_rank_output_is_sorted_permutation_of_input(sample_stops: list[StopRecord]) -> None:
    """Given stops, when ranked, then distances are non-decreasing and no stop is lost."""
    ranked = rank_stops(sample_stops, ORIGIN)

    distances = [r.distance for r in ranked]
    assert distances == sorted(distances)
    assert len(ranked) == len(sample_stops)
    assert {r.stop_id for r in ranked} == {s.stop_id for s in sample_stops}


def test_rank_keeps_input_order_for_equal_distances() -> None:
    """Given stops at the same place, when ranked, then their input order is kept."""
    stops = [
        make_stop("second-place-a", 1.3100, 103.8000),
        make_stop("closest", 1.3010, 103.8010),
        make_stop("second-place-b", 1.3100, 103.8000),
        make_stop("second-place-c", 1.3100, 103.8000),
    ]

    ranked = rank_stops(stops, ORIGIN)

    assert [r.stop_id for r in ranked] == [
        "closest",
        "second-place-a",
        "second-place-b",
        "second-place-c",
    ]


def test_rank_passes_stop_fields_through(sample_stops: list[StopRecord]) -> None:
    """Given stops, when ranked, then name, address and coordinates are unchanged."""
    ranked = rank_stops(sample_stops, ORIGIN)

    by_id = {r.stop_id: r for r in ranked}
    assert by_id["near"].stop is sample_stops[1]
    assert by_id["near"].stop_name == "Orchard Stn"
    assert by_id["near"].address == "Orchard Blvd"


def test_rank_in_kilometers(sample_stops: list[StopRecord]) -> None:
    """Given km_fixed_2dp, when ranked, then distances are kilometers with two decimals."""
    ranked = rank_stops(sample_stops, ORIGIN, KM_FIXED_2DP)

    assert [r.distance for r in ranked] == [0.16, 1.11, 5.56]
    assert [r.formatted_distance for r in ranked] == ["00.16", "01.11", "05.56"]


def test_rank_empty_input_returns_empty_list() -> None:
    """Given no stops, when ranked, then the result is empty and nothing is raised."""
    assert rank_stops([], ORIGIN) == []


def test_rank_missing_input_is_treated_as_empty() -> None:
    """Given None instead of a collection, when ranked, then the result is empty."""
    assert rank_stops(None, ORIGIN) == []


def test_rank_produces_a_new_sequence_each_time(sample_stops: list[StopRecord]) -> None:
    """Given the same input, when ranked twice, then equal but distinct lists are returned."""
    first = rank_stops(sample_stops, ORIGIN)
    second = rank_stops(sample_stops, ORIGIN)

    assert first == second
    assert first is not second


def test_filter_matches_name_case_insensitively(sample_stops: list[StopRecord]) -> None:
    """Given a lower-case query, when filtering, then names match regardless of case."""
    result = filter_stops(sample_stops, "orchard")

    assert [s.stop_id for s in result] == ["near"]


def test_filter_matches_address(sample_stops: list[StopRecord]) -> None:
    """Given a query found only in an address, when filtering, then the stop matches."""
    result = filter_stops(sample_stops, "CLUNY")

    assert [s.stop_id for s in result] == ["mid"]


def test_filter_empty_query_returns_all_in_order(sample_stops: list[StopRecord]) -> None:
    """Given an empty query, when filtering, then every stop is returned in input order."""
    result = filter_stops(sample_stops, "")

    assert result == sample_stops
    assert [s.stop_id for s in result] == ["far", "near", "mid"]


def test_filter_preserves_input_order() -> None:
    """Given several matches, when filtering, then they keep the collection order."""
    stops = [
        make_stop("3", 1.35, 103.8, "Road C", "Main Road"),
        make_stop("1", 1.30, 103.8, "Road A", "Side Street"),
        make_stop("2", 1.31, 103.8, "Road B", "Main Road"),
    ]

    result = filter_stops(stops, "road")

    assert [s.stop_id for s in result] == ["3", "1", "2"]


def test_filter_results_are_subset_containing_query(sample_stops: list[StopRecord]) -> None:
    """Given any query, when filtering, then each result contains it in name or address."""
    for query in ["r", "Rd", "gardens", "zzz", "o"]:
        result = filter_stops(sample_stops, query)
        assert all(s in sample_stops for s in result)
        assert all(
            query.lower() in s.stop_name.lower() or query.lower() in s.address.lower()
            for s in result
        )


def test_filter_no_match_returns_empty(sample_stops: list[StopRecord]) -> None:
    """Given a query nothing contains, when filtering, then the result is empty."""
    assert filter_stops(sample_stops, "Jurong") == []


def test_filter_missing_collection_returns_empty() -> None:
    """Given None instead of a collection, when filtering, then the result is empty."""
    assert filter_stops(None, "anything") == []


def test_matches_query_uses_casefold() -> None:
    """Given text with special case folding, when matching, then casefold rules apply."""
    stop = make_stop("1", 48.1, 11.5, "Großhadern", "")

    assert matches_query(stop, "GROSSHADERN")


@pytest.mark.asyncio
async def test_fake_feed_raises_configured_error() -> None:
    """Given a failing fake feed, when fetching, then the error is raised."""
    feed = FakeStopFeed(error=FeedUnavailable("down"))

    with pytest.raises(FeedUnavailable):
        await feed.fetch_all_stops()

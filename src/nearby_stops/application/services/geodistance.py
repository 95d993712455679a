"""Great-circle distance between two coordinates."""

import math

from nearby_stops.domain.models.coordinate import Coordinate
from nearby_stops.domain.models.distance_unit import KM_FIXED_2DP, METERS_ROUNDED, DistanceUnit

EARTH_RADIUS_KM = 6371.0


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Haversine distance in kilometers on a sphere of radius 6371 km."""
    phi_a = math.radians(a.latitude)
    phi_b = math.radians(b.latitude)
    delta_phi = math.radians(b.latitude - a.latitude)
    delta_lambda = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi_a) * math.cos(phi_b) * math.sin(delta_lambda / 2) ** 2
    )
    # Rounding can push h a hair outside [0, 1] for antipodal points
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return EARTH_RADIUS_KM * c


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def distance(a: Coordinate, b: Coordinate, unit: DistanceUnit = METERS_ROUNDED) -> float:
    """Distance between two coordinates in the requested unit mode.

    ``meters_rounded`` gives whole meters, ``km_fixed_2dp`` gives kilometers
    rounded to two decimals.
    """
    km = haversine_km(a, b)
    if unit == METERS_ROUNDED:
        return _round_half_up(km * 1000)
    if unit == KM_FIXED_2DP:
        return _round_half_up(km * 100) / 100
    raise ValueError(f"Unknown distance unit: {unit!r}")

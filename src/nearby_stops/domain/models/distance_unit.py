"""Distance unit modes."""

from typing import Literal

DistanceUnit = Literal["meters_rounded", "km_fixed_2dp"]

METERS_ROUNDED: DistanceUnit = "meters_rounded"
KM_FIXED_2DP: DistanceUnit = "km_fixed_2dp"

DISTANCE_UNITS: tuple[DistanceUnit, ...] = (METERS_ROUNDED, KM_FIXED_2DP)


def format_distance(value: float, unit: DistanceUnit) -> str:
    """Render a distance value without unit, e.g. ``"152"`` or ``"03.42"``.

    Kilometers keep two decimals and at least two integer digits.
    """
    if unit == KM_FIXED_2DP:
        return f"{value:05.2f}"
    return str(int(value))

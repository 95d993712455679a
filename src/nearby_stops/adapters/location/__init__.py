"""Location provider adapters."""

from nearby_stops.adapters.location.configured_location_provider import (
    ConfiguredLocationProvider,
)

__all__ = ["ConfiguredLocationProvider"]

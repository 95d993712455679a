"""Ports (interfaces) for the ports-and-adapters architecture."""

from nearby_stops.domain.ports.location_provider import LocationProvider
from nearby_stops.domain.ports.stop_feed import StopFeed

__all__ = [
    "LocationProvider",
    "StopFeed",
]

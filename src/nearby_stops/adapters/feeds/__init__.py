"""Stop feed adapters."""

from nearby_stops.adapters.feeds.http_stop_feed import HttpStopFeed
from nearby_stops.adapters.feeds.mvg_stop_feed import MvgStopFeed
from nearby_stops.adapters.feeds.static_stop_feed import StaticStopFeed
from nearby_stops.adapters.feeds.stop_feed_factory import create_stop_feed
from nearby_stops.adapters.feeds.stop_record_parser import parse_stop_records

__all__ = [
    "HttpStopFeed",
    "MvgStopFeed",
    "StaticStopFeed",
    "create_stop_feed",
    "parse_stop_records",
]

"""Builds the stop feed selected by configuration."""

import logging
from typing import TYPE_CHECKING

from nearby_stops.adapters.config.app_config import AppConfig
from nearby_stops.domain.ports.stop_feed import StopFeed

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


def create_stop_feed(config: AppConfig, session: "ClientSession | None" = None) -> StopFeed:
    """Create the stop feed for ``config.feed_provider``.

    Raises:
        ValueError: The selected provider is missing its URL, file or session.
    """
    from nearby_stops.adapters.feeds.http_stop_feed import HttpStopFeed
    from nearby_stops.adapters.feeds.mvg_stop_feed import MvgStopFeed
    from nearby_stops.adapters.feeds.static_stop_feed import StaticStopFeed

    provider = config.feed_provider
    if provider == "mvg":
        logger.info("Using MVG station list as stop feed")
        return MvgStopFeed()
    if provider == "file":
        if not config.feed_file:
            raise ValueError("feed_file must be set when feed_provider is 'file'")
        logger.info(f"Using stop file {config.feed_file}")
        return StaticStopFeed(config.feed_file)

    if not config.feed_url:
        raise ValueError("feed_url must be set when feed_provider is 'http'")
    if session is None:
        raise ValueError("An aiohttp session is required for the HTTP stop feed")
    logger.info("Using HTTP stop feed")
    return HttpStopFeed(config.feed_url, session, timeout_seconds=config.feed_timeout_seconds)

"""Configuration adapters."""

from nearby_stops.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]

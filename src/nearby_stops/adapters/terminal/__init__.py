"""Terminal rendering adapters."""

from nearby_stops.adapters.terminal.stop_list_formatter import StopListFormatter

__all__ = ["StopListFormatter"]

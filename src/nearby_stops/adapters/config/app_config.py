"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nearby_stops.domain.models.disclosure_settings import DisclosureSettings
from nearby_stops.domain.models.distance_unit import DISTANCE_UNITS

FEED_PROVIDERS = ("http", "mvg", "file")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _normalize_feed_provider(v: str) -> str:
    if v.lower() not in FEED_PROVIDERS:
        raise ValueError("feed_provider must be either 'http', 'mvg' or 'file'")
    return v.lower()


def _normalize_unit_mode(v: str) -> str:
    if v not in DISTANCE_UNITS:
        raise ValueError("unit_mode must be either 'meters_rounded' or 'km_fixed_2dp'")
    return v


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Stop feed configuration
    feed_provider: str = Field(
        default="http", description="Stop feed: 'http' (JSON over HTTP), 'mvg' or 'file'"
    )
    feed_url: str | None = Field(
        default=None,
        description="URL of the JSON stop feed, e.g. https://<db>.firebaseio.com/busStops.json",
    )
    feed_file: str | None = Field(
        default=None, description="Path to a local JSON stop feed when feed_provider='file'"
    )
    feed_timeout_seconds: int = Field(
        default=10, description="Timeout for stop feed requests in seconds"
    )

    # Location configuration
    latitude: float | None = Field(default=None, description="Latitude of the default position")
    longitude: float | None = Field(
        default=None, description="Longitude of the default position"
    )
    location_permission_granted: bool = Field(
        default=True, description="Whether the position may be used at all"
    )

    # Display configuration
    unit_mode: str = Field(
        default="meters_rounded",
        description="Distance unit: 'meters_rounded' or 'km_fixed_2dp'",
    )
    initial_visible: int = Field(default=2, description="Stops shown before 'show more'")
    max_incremental_visible: int = Field(
        default=5,
        description="Exclusive bound of stops shown one by one before expanding fully",
    )

    log_level: str = Field(default="INFO", description="Logging level")

    # TOML config file path
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with [feed], [location], [display]",
    )

    @field_validator("feed_provider")
    @classmethod
    def validate_feed_provider(cls, v: str) -> str:
        """Validate feed provider is 'http', 'mvg' or 'file'."""
        return _normalize_feed_provider(v)

    @field_validator("unit_mode")
    @classmethod
    def validate_unit_mode(cls, v: str) -> str:
        """Validate unit mode is 'meters_rounded' or 'km_fixed_2dp'."""
        return _normalize_unit_mode(v)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return v.upper()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its [feed], [location] and [display] sections.

        Raises:
            ValueError: config_file is not set, or the file holds invalid values.
            FileNotFoundError: config_file does not exist.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load TOML configuration")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        feed = toml_data.get("feed", {})
        if "provider" in feed:
            self.feed_provider = _normalize_feed_provider(feed["provider"])
        if "url" in feed:
            self.feed_url = feed["url"]
        if "file" in feed:
            self.feed_file = feed["file"]
        if "timeout_seconds" in feed:
            self.feed_timeout_seconds = int(feed["timeout_seconds"])

        location = toml_data.get("location", {})
        if "latitude" in location:
            self.latitude = float(location["latitude"])
        if "longitude" in location:
            self.longitude = float(location["longitude"])
        if "permission_granted" in location:
            self.location_permission_granted = bool(location["permission_granted"])

        display = toml_data.get("display", {})
        if "unit_mode" in display:
            self.unit_mode = _normalize_unit_mode(display["unit_mode"])
        if "initial_visible" in display:
            self.initial_visible = int(display["initial_visible"])
        if "max_incremental_visible" in display:
            self.max_incremental_visible = int(display["max_incremental_visible"])

        return toml_data

    def disclosure_settings(self) -> DisclosureSettings:
        """Disclosure thresholds from this configuration."""
        return DisclosureSettings(
            initial_visible=self.initial_visible,
            max_incremental_visible=self.max_incremental_visible,
        )

"""Tests for configuration adapter."""

from pathlib import Path
from tempfile import NamedTemporaryFile

import pytest

from nearby_stops.adapters.config import AppConfig
from nearby_stops.domain.models import DisclosureSettings


def _write_toml(content: str) -> str:
    with NamedTemporaryFile(mode="w", suffix=".toml", delete=False, encoding="utf-8") as f:
        f.write(content)
        return f.name


def test_config_loads_defaults() -> None:
    """Given no environment variables, when loading config, then defaults are used."""
    config = AppConfig()

    assert config.feed_provider == "http"
    assert config.feed_timeout_seconds == 10
    assert config.unit_mode == "meters_rounded"
    assert config.initial_visible == 2
    assert config.max_incremental_visible == 5
    assert config.location_permission_granted is True
    assert config.log_level == "INFO"


def test_config_loads_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given environment variables, when loading config, then they are used."""
    monkeypatch.setenv("FEED_PROVIDER", "MVG")
    monkeypatch.setenv("LATITUDE", "48.1374")
    monkeypatch.setenv("LONGITUDE", "11.5755")
    monkeypatch.setenv("UNIT_MODE", "km_fixed_2dp")
    monkeypatch.setenv("INITIAL_VISIBLE", "3")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = AppConfig()

    assert config.feed_provider == "mvg"
    assert config.latitude == pytest.approx(48.1374)
    assert config.longitude == pytest.approx(11.5755)
    assert config.unit_mode == "km_fixed_2dp"
    assert config.initial_visible == 3
    assert config.log_level == "DEBUG"


def test_config_validates_feed_provider(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown feed provider, when loading config, then validation error is raised."""
    monkeypatch.setenv("FEED_PROVIDER", "ftp")

    with pytest.raises(ValueError, match="feed_provider must be either"):
        AppConfig()


def test_config_validates_unit_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an unknown unit mode, when loading config, then validation error is raised."""
    monkeypatch.setenv("UNIT_MODE", "miles")

    with pytest.raises(ValueError, match="unit_mode must be either"):
        AppConfig()


def test_config_validates_log_level() -> None:
    """Given an unknown log level, when loading config, then validation error is raised."""
    with pytest.raises(ValueError, match="log_level must be one of"):
        AppConfig(log_level="chatty")


def test_config_applies_toml_overrides() -> None:
    """Given a TOML file, when loading overrides, then every section is applied."""
    temp_path = _write_toml(
        """
[feed]
provider = "http"
url = "https://example-project.firebaseio.com/busStops.json"
timeout_seconds = 4

[location]
latitude = 1.3
longitude = 103.8
permission_granted = false

[display]
unit_mode = "km_fixed_2dp"
initial_visible = 3
max_incremental_visible = 6
"""
    )

    try:
        config = AppConfig(config_file=temp_path)
        data = config.load_toml_overrides()

        assert "feed" in data
        assert config.feed_url == "https://example-project.firebaseio.com/busStops.json"
        assert config.feed_timeout_seconds == 4
        assert config.latitude == 1.3
        assert config.longitude == 103.8
        assert config.location_permission_granted is False
        assert config.unit_mode == "km_fixed_2dp"
        assert config.initial_visible == 3
        assert config.max_incremental_visible == 6
    finally:
        Path(temp_path).unlink()


def test_config_toml_without_sections_keeps_values() -> None:
    """Given a TOML file without known sections, when loading, then values stay unchanged."""
    temp_path = _write_toml('title = "stops"\n')

    try:
        config = AppConfig(config_file=temp_path, feed_provider="file", feed_file="stops.json")
        config.load_toml_overrides()

        assert config.feed_provider == "file"
        assert config.feed_file == "stops.json"
    finally:
        Path(temp_path).unlink()


def test_config_toml_validates_unit_mode() -> None:
    """Given an invalid unit mode in TOML, when loading, then ValueError is raised."""
    temp_path = _write_toml('[display]\nunit_mode = "feet"\n')

    try:
        config = AppConfig(config_file=temp_path)
        with pytest.raises(ValueError, match="unit_mode must be either"):
            config.load_toml_overrides()
    finally:
        Path(temp_path).unlink()


def test_config_raises_error_when_file_not_found() -> None:
    """Given non-existent config file, when loading config, then FileNotFoundError is raised."""
    config = AppConfig(config_file="nonexistent.toml")

    with pytest.raises(FileNotFoundError, match="Configuration file not found"):
        config.load_toml_overrides()


def test_config_raises_error_when_config_file_not_set() -> None:
    """Given config_file is None, when loading config, then ValueError is raised."""
    config = AppConfig(config_file=None)

    with pytest.raises(ValueError, match="config_file must be set"):
        config.load_toml_overrides()


def test_disclosure_settings_from_config() -> None:
    """Given display thresholds, when building settings, then they are carried over."""
    config = AppConfig(initial_visible=3, max_incremental_visible=7)

    assert config.disclosure_settings() == DisclosureSettings(
        initial_visible=3, max_incremental_visible=7
    )


def test_disclosure_settings_rejects_inverted_thresholds() -> None:
    """Given max not above initial, when building settings, then ValueError is raised."""
    config = AppConfig(initial_visible=4, max_incremental_visible=4)

    with pytest.raises(ValueError, match="must be greater than initial_visible"):
        config.disclosure_settings()

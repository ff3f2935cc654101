"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from nearby_departures.domain.models.search_settings import SearchSettings

# TOML table -> settings that table may override
TOML_SECTIONS: dict[str, tuple[str, ...]] = {
    "search": (
        "default_location",
        "search_radius_meters",
        "station_type",
        "enrichment_timeout_seconds",
        "max_concurrent_enrichments",
        "timezone",
    ),
    "provider": ("maps_base_url", "http_timeout_seconds"),
    "server": ("host", "port", "log_level"),
}


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_assignment=True,
    )

    # Server configuration
    host: str = Field(default="0.0.0.0", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Logging level name")

    # Maps provider configuration
    google_maps_api_key: str = Field(
        default="", description="API key for the Google Maps web services"
    )
    maps_base_url: str = Field(
        default="https://maps.googleapis.com/maps/api",
        description="Base URL of the maps web services",
    )
    http_timeout_seconds: float = Field(
        default=10.0, description="Total timeout for a single maps API request in seconds"
    )

    # Search configuration
    default_location: str = Field(
        default="Athens, GA", description="Place searched when no location is given"
    )
    search_radius_meters: int = Field(
        default=16093, description="Radius of the nearby station search in meters (10 miles)"
    )
    station_type: str = Field(
        default="bus_station", description="Place type used to find stations"
    )
    enrichment_timeout_seconds: float = Field(
        default=5.0,
        description="Time budget per station transit lookup before it counts as failed",
    )
    max_concurrent_enrichments: int = Field(
        default=10, description="Maximum number of simultaneous transit lookups"
    )
    timezone: str = Field(
        default="America/New_York",
        description="Time zone for departure texts without provider time zone (IANA name)",
    )

    # TOML config file path (optional)
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file overriding search/provider/server settings",
    )

    @field_validator("search_radius_meters", "max_concurrent_enrichments")
    @classmethod
    def validate_positive_int(cls, v: int) -> int:
        """Validate counts and distances are positive."""
        if v <= 0:
            raise ValueError("value must be positive")
        return v

    @field_validator("enrichment_timeout_seconds", "http_timeout_seconds")
    @classmethod
    def validate_positive_timeout(cls, v: float) -> float:
        """Validate timeouts are positive."""
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA zone."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA time zone name: {v}") from e
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard level names."""
        if v.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v.upper()

    def load_toml_overrides(self) -> dict[str, Any]:
        """Load the TOML file and apply its [search], [provider] and [server] tables.

        Returns the parsed TOML data. Does nothing when config_file is not set.
        """
        if not self.config_file:
            return {}

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        for section, keys in TOML_SECTIONS.items():
            table = toml_data.get(section, {})
            if not isinstance(table, dict):
                raise ValueError(f"TOML config '{section}' must be a table")
            for key in keys:
                if key in table:
                    setattr(self, key, table[key])

        return toml_data

    def search_settings(self) -> SearchSettings:
        """Build the per-deployment search settings."""
        return SearchSettings(
            default_location=self.default_location,
            radius_meters=self.search_radius_meters,
            station_type=self.station_type,
        )

"""Adapters layer - external system integrations."""

from nearby_departures.adapters.config import AppConfig
from nearby_departures.adapters.google_maps import (
    GoogleDirectionsTransitRepository,
    GoogleGeocoder,
    GooglePlacesStationRepository,
    MapsHttpClient,
)

__all__ = [
    "AppConfig",
    "GoogleDirectionsTransitRepository",
    "GoogleGeocoder",
    "GooglePlacesStationRepository",
    "MapsHttpClient",
]

"""Google Maps web services adapters."""

from nearby_departures.adapters.google_maps.directions_transit_repository import (
    GoogleDirectionsTransitRepository,
)
from nearby_departures.adapters.google_maps.geocoder import GoogleGeocoder
from nearby_departures.adapters.google_maps.http_client import MapsHttpClient
from nearby_departures.adapters.google_maps.places_station_repository import (
    GooglePlacesStationRepository,
)

__all__ = [
    "GoogleDirectionsTransitRepository",
    "GoogleGeocoder",
    "GooglePlacesStationRepository",
    "MapsHttpClient",
]

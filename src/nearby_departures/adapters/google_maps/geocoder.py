"""Geocoder adapter using the Google Geocoding API."""

import logging
from typing import Any

from nearby_departures.adapters.google_maps.constants import GEOCODE_PATH, STATUS_OK
from nearby_departures.adapters.google_maps.http_client import MapsHttpClient
from nearby_departures.domain.exceptions import GeocodeError, InvalidCoordinateError
from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)


class GoogleGeocoder(Geocoder):
    """Adapter resolving addresses with the Geocoding API. Never retries."""

    def __init__(self, http_client: MapsHttpClient) -> None:
        """Initialize with the maps HTTP client."""
        self._http_client = http_client

    async def geocode(self, address: str) -> Coordinates:
        """Resolve an address to the coordinates of its first result.

        Raises:
            GeocodeError: Non-OK status, zero results or unusable location data.
        """
        data = await self._http_client.get_json(
            GEOCODE_PATH, {"address": address}, error_cls=GeocodeError
        )

        status = data.get("status")
        if status != STATUS_OK:
            logger.warning(
                f"Geocoding '{address}' failed with status {status}: "
                f"{data.get('error_message', '')}"
            )
            raise GeocodeError(f"Geocoding failed for '{address}'", status=status)

        results = data.get("results") or []
        if not results:
            raise GeocodeError(f"Geocoding returned no results for '{address}'", status=status)

        return self._parse_location(results[0], address)

    @staticmethod
    def _parse_location(result: dict[str, Any], address: str) -> Coordinates:
        """Extract geometry.location from a geocoding result."""
        try:
            location = result["geometry"]["location"]
            return Coordinates(float(location["lat"]), float(location["lng"]))
        except (KeyError, TypeError, ValueError, InvalidCoordinateError) as e:
            raise GeocodeError(f"Geocoding result for '{address}' has no usable location") from e

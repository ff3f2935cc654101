"""Station repository adapter using the Google Places Nearby Search API."""

import logging
from typing import Any

from nearby_departures.adapters.google_maps.constants import (
    PLACES_NEARBY_PATH,
    STATUS_OK,
    STATUS_ZERO_RESULTS,
)
from nearby_departures.adapters.google_maps.http_client import MapsHttpClient
from nearby_departures.domain.exceptions import InvalidCoordinateError, LocatorError
from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.models.station import NO_DESCRIPTION, Station
from nearby_departures.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)


class GooglePlacesStationRepository(StationRepository):
    """Adapter finding stations with the Places Nearby Search API."""

    def __init__(self, http_client: MapsHttpClient) -> None:
        """Initialize with the maps HTTP client."""
        self._http_client = http_client

    async def find_nearby_stations(
        self,
        center: Coordinates,
        radius_meters: int,
        station_type: str,
    ) -> list[Station]:
        """Find stations of the given place type around center.

        Returns:
            Stations in provider order; empty when the provider has no results.

        Raises:
            LocatorError: Non-success status or network error.
        """
        params: dict[str, str | int] = {
            "location": center.as_query_value(),
            "radius": radius_meters,
            "type": station_type,
        }
        data = await self._http_client.get_json(PLACES_NEARBY_PATH, params, error_cls=LocatorError)

        status = data.get("status")
        if status == STATUS_ZERO_RESULTS:
            logger.info(f"No {station_type} places within {radius_meters}m of {params['location']}")
            return []
        if status != STATUS_OK:
            logger.warning(
                f"Places search failed with status {status}: {data.get('error_message', '')}"
            )
            raise LocatorError("Failed to fetch stations from the maps provider", status=status)

        return self._parse_places(data.get("results") or [])

    def _parse_places(self, places: list[Any]) -> list[Station]:
        """Convert place results to stations, skipping unusable and duplicate entries."""
        stations: list[Station] = []
        seen_ids: set[str] = set()
        for place in places:
            station = self._build_station(place)
            if station is None:
                continue
            if station.id in seen_ids:
                logger.debug(f"Skipping duplicate place {station.id}")
                continue
            seen_ids.add(station.id)
            stations.append(station)
        return stations

    @staticmethod
    def _build_station(place: Any) -> Station | None:
        """Build a Station from one place result, or None if it lacks an id or location."""
        if not isinstance(place, dict) or not place.get("place_id"):
            logger.warning(f"Skipping place without place_id: {place!r:.200}")
            return None

        try:
            location = place["geometry"]["location"]
            coordinates = Coordinates(float(location["lat"]), float(location["lng"]))
        except (KeyError, TypeError, ValueError, InvalidCoordinateError):
            logger.warning(f"Skipping place {place['place_id']} without usable location")
            return None

        return Station(
            id=str(place["place_id"]),
            name=str(place.get("name") or place["place_id"]),
            coordinates=coordinates,
            description=place.get("vicinity") or NO_DESCRIPTION,
        )

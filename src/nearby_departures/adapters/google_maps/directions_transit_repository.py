"""Transit repository adapter using the Google Directions API."""

import logging
from typing import Any

from nearby_departures.adapters.google_maps.constants import (
    DEPARTURE_TIME_NOW,
    DIRECTIONS_PATH,
    STATUS_OK,
    STATUS_ZERO_RESULTS,
    TRAVEL_MODE_TRANSIT,
)
from nearby_departures.adapters.google_maps.http_client import MapsHttpClient
from nearby_departures.domain.exceptions import TransitLookupError
from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.ports.transit_repository import TransitRepository

logger = logging.getLogger(__name__)


class GoogleDirectionsTransitRepository(TransitRepository):
    """Adapter fetching transit directions with the Directions API."""

    def __init__(self, http_client: MapsHttpClient) -> None:
        """Initialize with the maps HTTP client."""
        self._http_client = http_client

    async def get_transit_steps(
        self, origin: Coordinates, destination: Coordinates
    ) -> list[dict[str, Any]]:
        """Get transit_details of the first route leaving now from origin to destination.

        Walking and driving steps are dropped.

        Raises:
            TransitLookupError: Non-success status or network error.
        """
        params: dict[str, str | int] = {
            "origin": origin.as_query_value(),
            "destination": destination.as_query_value(),
            "mode": TRAVEL_MODE_TRANSIT,
            "departure_time": DEPARTURE_TIME_NOW,
        }
        data = await self._http_client.get_json(
            DIRECTIONS_PATH, params, error_cls=TransitLookupError
        )

        status = data.get("status")
        if status == STATUS_ZERO_RESULTS:
            logger.debug(f"No transit route to {params['destination']}")
            return []
        if status != STATUS_OK:
            raise TransitLookupError(
                f"Directions request failed with status {status}", status=status
            )

        return self.extract_transit_details(data.get("routes") or [])

    @staticmethod
    def extract_transit_details(routes: list[Any]) -> list[dict[str, Any]]:
        """Collect the transit_details of every transit step of the first route."""
        if not routes or not isinstance(routes[0], dict):
            return []

        details: list[dict[str, Any]] = []
        for leg in routes[0].get("legs") or []:
            for step in leg.get("steps") or []:
                transit_details = step.get("transit_details") if isinstance(step, dict) else None
                if isinstance(transit_details, dict):
                    details.append(transit_details)
        return details

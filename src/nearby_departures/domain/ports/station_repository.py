"""Station repository port."""

from typing import Protocol

from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.models.station import Station


class StationRepository(Protocol):
    """Port for finding transit stations around a point."""

    async def find_nearby_stations(
        self,
        center: Coordinates,
        radius_meters: int,
        station_type: str,
    ) -> list[Station]:
        """Find stations within radius of center, in provider order."""
        ...

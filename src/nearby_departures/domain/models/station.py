"""Station domain model."""

from dataclasses import dataclass

from nearby_departures.domain.models.coordinates import Coordinates

NO_DESCRIPTION = "No description available"


@dataclass(frozen=True)
class Station:
    """Represents a transit stop returned by the nearby search."""

    id: str
    name: str
    coordinates: Coordinates
    description: str = NO_DESCRIPTION

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

"""Coordinates domain model."""

import math
from dataclasses import dataclass

from nearby_departures.domain.exceptions import InvalidCoordinateError


@dataclass(frozen=True)
class Coordinates:
    """A WGS84 latitude/longitude pair in degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject values outside the valid latitude/longitude ranges."""
        if not isinstance(self.latitude, (int, float)) or not isinstance(
            self.longitude, (int, float)
        ):
            raise InvalidCoordinateError(
                f"Coordinates must be numeric, got ({self.latitude!r}, {self.longitude!r})"
            )
        if not math.isfinite(self.latitude) or not -90.0 <= self.latitude <= 90.0:
            raise InvalidCoordinateError(f"Latitude {self.latitude} is outside [-90, 90]")
        if not math.isfinite(self.longitude) or not -180.0 <= self.longitude <= 180.0:
            raise InvalidCoordinateError(f"Longitude {self.longitude} is outside [-180, 180]")

    def as_query_value(self) -> str:
        """Format as the "lat,lng" string the maps web services expect."""
        return f"{self.latitude},{self.longitude}"

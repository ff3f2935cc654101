"""Great-circle distance between coordinates using the haversine formula."""

import math

from nearby_departures.domain.models.coordinates import Coordinates

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great-circle distance between two points on Earth.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)

    Returns:
        Distance in kilometers

    Raises:
        InvalidCoordinateError: If any value is out of range or not finite.
    """
    return distance_km(Coordinates(lat1, lon1), Coordinates(lat2, lon2))


def distance_km(a: Coordinates, b: Coordinates) -> float:
    """Calculate the haversine distance in kilometers between two coordinates."""
    lat1_rad = math.radians(a.latitude)
    lat2_rad = math.radians(b.latitude)
    delta_lat = math.radians(b.latitude - a.latitude)
    delta_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    # Clamp rounding noise so antipodal points don't produce a math domain error
    h = min(1.0, max(0.0, h))
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return EARTH_RADIUS_KM * c

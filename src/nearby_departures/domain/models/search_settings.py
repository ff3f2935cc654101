"""Search settings domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SearchSettings:
    """Search parameters that are fixed per deployment."""

    default_location: str = "Athens, GA"
    radius_meters: int = 16093  # 10 miles
    station_type: str = "bus_station"

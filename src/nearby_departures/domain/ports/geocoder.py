"""Geocoder port."""

from typing import Protocol

from nearby_departures.domain.models.coordinates import Coordinates


class Geocoder(Protocol):
    """Port for resolving a free-text address to coordinates."""

    async def geocode(self, address: str) -> Coordinates:
        """Resolve an address, raising GeocodeError when it cannot be resolved."""
        ...

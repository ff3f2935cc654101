"""Transit repository port."""

from typing import Any, Protocol

from nearby_departures.domain.models.coordinates import Coordinates


class TransitRepository(Protocol):
    """Port for fetching transit directions between two points."""

    async def get_transit_steps(
        self, origin: Coordinates, destination: Coordinates
    ) -> list[dict[str, Any]]:
        """Get the transit_details payloads of the first transit route, in travel order.

        Returns an empty list when the provider finds no transit connection.
        """
        ...

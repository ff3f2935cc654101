"""Per-client search coordination for long-running surfaces."""

import logging
from typing import TYPE_CHECKING

from nearby_departures.application.services.search_coordinator import SearchCoordinator
from nearby_departures.domain.models import SearchRequest, SearchResult
from nearby_departures.domain.ports.station_search import ClientStationSearch

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_departures.application.services.station_search_service import (
        StationSearchService,
    )


class ClientSearchService(ClientStationSearch):
    """Routes searches of the same client through one SearchCoordinator.

    A client's newer search cancels its older one. Searches without a client id
    run independently. Coordinators are dropped as soon as they have no search
    in flight.
    """

    def __init__(self, search_service: "StationSearchService") -> None:
        """Initialize with the search service shared by all clients."""
        self._search_service = search_service
        self._coordinators: dict[str, SearchCoordinator] = {}

    @property
    def active_clients(self) -> int:
        return len(self._coordinators)

    async def search(self, request: SearchRequest, client_id: str | None = None) -> SearchResult:
        """Run a search, superseding the previous search of the same client."""
        if not client_id:
            return await self._search_service.search(request)

        coordinator = self._coordinators.get(client_id)
        if coordinator is None:
            coordinator = SearchCoordinator(self._search_service)
            self._coordinators[client_id] = coordinator

        try:
            return await coordinator.search(request)
        finally:
            if coordinator.is_idle and self._coordinators.get(client_id) is coordinator:
                del self._coordinators[client_id]

    async def cancel_all(self) -> None:
        """Cancel every search still in flight."""
        coordinators = list(self._coordinators.values())
        self._coordinators.clear()
        for coordinator in coordinators:
            await coordinator.cancel()
        if coordinators:
            logger.info(f"Cancelled searches of {len(coordinators)} client(s)")

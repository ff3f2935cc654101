"""Station search port used by the outer surfaces."""

from typing import Protocol

from nearby_departures.domain.models.search import SearchRequest, SearchResult


class ClientStationSearch(Protocol):
    """Port for running searches on behalf of identified clients."""

    async def search(self, request: SearchRequest, client_id: str | None = None) -> SearchResult:
        """Run a search; a newer search with the same client_id supersedes an older one."""
        ...

    async def cancel_all(self) -> None:
        """Cancel every search still in flight."""
        ...

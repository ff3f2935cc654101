"""Keeps only the latest search of a client alive."""

import asyncio
import logging
from typing import TYPE_CHECKING

from nearby_departures.domain.exceptions import SearchSupersededError
from nearby_departures.domain.models import SearchRequest, SearchResult

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_departures.application.services.station_search_service import (
        StationSearchService,
    )


class SearchCoordinator:
    """Runs searches for one client, cancelling a search when a newer one starts.

    A superseded search never returns data: its caller gets SearchSupersededError,
    even if the result arrived just before the newer search started awaiting.
    """

    def __init__(self, search_service: "StationSearchService") -> None:
        """Initialize with the search service to delegate to."""
        self._search_service = search_service
        self._generation = 0
        self._current: asyncio.Task[SearchResult] | None = None

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_idle(self) -> bool:
        return self._current is None or self._current.done()

    async def search(self, request: SearchRequest) -> SearchResult:
        """Start a search, superseding any search still in flight."""
        self._generation += 1
        generation = self._generation

        if self._current is not None and not self._current.done():
            logger.info(f"Cancelling search #{generation - 1} superseded by #{generation}")
            self._current.cancel()

        task = asyncio.create_task(self._search_service.search(request))
        self._current = task

        try:
            result = await task
        except asyncio.CancelledError:
            if task.cancelled() and generation != self._generation:
                raise SearchSupersededError(generation) from None
            raise

        if generation != self._generation:
            logger.debug(f"Discarding result of superseded search #{generation}")
            raise SearchSupersededError(generation)
        return result

    async def cancel(self) -> None:
        """Cancel the search in flight, if any, and wait for it to finish."""
        task = self._current
        if task is None or task.done():
            return
        self._generation += 1
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            logger.info("Search cancelled")
        except Exception as e:
            logger.debug(f"Cancelled search ended with error: {e}")

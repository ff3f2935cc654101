"""Station search use case: geocode, locate, enrich and aggregate."""

import logging
from typing import TYPE_CHECKING

from nearby_departures.application.services.result_aggregator import ResultAggregator
from nearby_departures.application.services.transit_enricher import TransitEnricher
from nearby_departures.domain.models import (
    ResultFilter,
    SearchRequest,
    SearchResult,
    SearchSettings,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_departures.domain.ports import Geocoder, StationRepository


class StationSearchService:
    """Runs the discovery-and-enrichment pipeline for one search."""

    def __init__(
        self,
        geocoder: "Geocoder",
        station_repository: "StationRepository",
        enricher: TransitEnricher,
        aggregator: ResultAggregator | None = None,
        settings: SearchSettings | None = None,
    ) -> None:
        """Initialize with the pipeline collaborators."""
        self._geocoder = geocoder
        self._station_repository = station_repository
        self._enricher = enricher
        self._aggregator = aggregator or ResultAggregator()
        self._settings = settings or SearchSettings()

    def resolve_location(self, location: str | None) -> str:
        """Return the location to geocode, using the default place for empty input."""
        stripped = (location or "").strip()
        return stripped or self._settings.default_location

    async def search(self, request: SearchRequest) -> SearchResult:
        """Run one search.

        Raises:
            GeocodeError: The location could not be resolved; no station search is made.
            LocatorError: The nearby station search failed.
        """
        location = self.resolve_location(request.location)
        origin = await self._geocoder.geocode(location)
        logger.info(f"Resolved '{location}' to {origin.as_query_value()}")

        stations = await self._station_repository.find_nearby_stations(
            origin,
            radius_meters=self._settings.radius_meters,
            station_type=self._settings.station_type,
        )
        logger.info(
            f"Found {len(stations)} {self._settings.station_type} station(s) within "
            f"{self._settings.radius_meters}m of '{location}'"
        )

        evaluated_at = self._enricher.now()
        enriched = await self._enricher.enrich_all(stations, origin, evaluated_at)

        ordered = self._aggregator.aggregate(enriched, request.reference)
        visible = self._aggregator.apply_filter(ordered, request.result_filter)

        return SearchResult(
            location=location,
            origin=origin,
            reference=request.reference,
            evaluated_at=evaluated_at,
            stations=ordered,
            visible=visible,
            result_filter=request.result_filter,
        )

    def refilter(self, result: SearchResult, result_filter: ResultFilter) -> SearchResult:
        """Apply a different filter to an existing result without searching again."""
        return result.refiltered(
            result_filter, self._aggregator.apply_filter(result.stations, result_filter)
        )

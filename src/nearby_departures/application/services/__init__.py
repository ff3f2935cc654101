"""Application services (use cases) for the station search pipeline."""

from nearby_departures.application.services.client_search_service import ClientSearchService
from nearby_departures.application.services.departure_time_normalizer import (
    DepartureTimeNormalizer,
)
from nearby_departures.application.services.result_aggregator import ResultAggregator
from nearby_departures.application.services.search_coordinator import SearchCoordinator
from nearby_departures.application.services.station_search_service import (
    SearchSettings,
    StationSearchService,
)
from nearby_departures.application.services.transit_enricher import TransitEnricher

__all__ = [
    "ClientSearchService",
    "DepartureTimeNormalizer",
    "ResultAggregator",
    "SearchCoordinator",
    "SearchSettings",
    "StationSearchService",
    "TransitEnricher",
]

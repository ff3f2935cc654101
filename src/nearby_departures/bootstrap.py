"""Wiring of the search pipeline from configuration."""

import logging
from typing import TYPE_CHECKING

from nearby_departures.adapters.google_maps import (
    GoogleDirectionsTransitRepository,
    GoogleGeocoder,
    GooglePlacesStationRepository,
    MapsHttpClient,
)
from nearby_departures.application.services import (
    ClientSearchService,
    DepartureTimeNormalizer,
    ResultAggregator,
    StationSearchService,
    TransitEnricher,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from nearby_departures.adapters.config import AppConfig


def create_search_service(config: "AppConfig", session: "ClientSession") -> StationSearchService:
    """Create a search service backed by the Google Maps web services."""
    if not config.google_maps_api_key:
        logger.warning("GOOGLE_MAPS_API_KEY is not set; maps requests will be rejected")

    http_client = MapsHttpClient(
        session=session,
        api_key=config.google_maps_api_key,
        base_url=config.maps_base_url,
        timeout_seconds=config.http_timeout_seconds,
    )
    enricher = TransitEnricher(
        GoogleDirectionsTransitRepository(http_client),
        DepartureTimeNormalizer(default_timezone=config.timezone),
        timeout_seconds=config.enrichment_timeout_seconds,
        max_concurrency=config.max_concurrent_enrichments,
    )
    return StationSearchService(
        geocoder=GoogleGeocoder(http_client),
        station_repository=GooglePlacesStationRepository(http_client),
        enricher=enricher,
        aggregator=ResultAggregator(),
        settings=config.search_settings(),
    )


def create_client_search(config: "AppConfig", session: "ClientSession") -> ClientSearchService:
    """Create the per-client search service used by the web API."""
    return ClientSearchService(create_search_service(config, session))

"""Domain models for nearby departures."""

from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.models.enriched_station import EnrichedStation
from nearby_departures.domain.models.error_details import ErrorDetails
from nearby_departures.domain.models.result_filter import ResultFilter
from nearby_departures.domain.models.route_departure import RouteDeparture
from nearby_departures.domain.models.search import SearchRequest, SearchResult
from nearby_departures.domain.models.search_settings import SearchSettings
from nearby_departures.domain.models.station import Station

__all__ = [
    "Coordinates",
    "EnrichedStation",
    "ErrorDetails",
    "ResultFilter",
    "RouteDeparture",
    "SearchRequest",
    "SearchResult",
    "SearchSettings",
    "Station",
]

"""Domain layer - core business logic and models."""

from nearby_departures.domain.models import (
    Coordinates,
    EnrichedStation,
    ResultFilter,
    RouteDeparture,
    SearchRequest,
    SearchResult,
    Station,
)
from nearby_departures.domain.ports import (
    Geocoder,
    StationRepository,
    TransitRepository,
)

__all__ = [
    "Coordinates",
    "EnrichedStation",
    "Geocoder",
    "ResultFilter",
    "RouteDeparture",
    "SearchRequest",
    "SearchResult",
    "Station",
    "StationRepository",
    "TransitRepository",
]

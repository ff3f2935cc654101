"""Enriched station domain model."""

from dataclasses import dataclass, replace

from nearby_departures.domain.models.route_departure import RouteDeparture
from nearby_departures.domain.models.station import Station


@dataclass(frozen=True)
class EnrichedStation:
    """A station with its transit routes, next departure and distance attached."""

    station: Station
    routes: tuple[RouteDeparture, ...] = ()
    next_departure: RouteDeparture | None = None
    distance_km: float | None = None  # None when no reference coordinate was given
    enrichment_error: str | None = None  # Set when fetching routes for this station failed

    @property
    def id(self) -> str:
        return self.station.id

    @property
    def name(self) -> str:
        return self.station.name

    @property
    def enrichment_failed(self) -> bool:
        return self.enrichment_error is not None

    def with_distance(self, distance_km: float | None) -> "EnrichedStation":
        """Return a copy with the distance from the reference point set."""
        return replace(self, distance_km=distance_km)

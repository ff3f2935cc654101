"""JSON models for enriched stations, shared by the web API and the CLI."""

from collections.abc import Sequence
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from nearby_departures.domain.models import EnrichedStation, RouteDeparture


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class CoordinatesResponse(_CamelModel):
    lat: float
    lng: float


class RouteDepartureResponse(_CamelModel):
    line: str
    departure_instant: datetime | None
    raw_text: str
    time_zone: str | None = None
    epoch_seconds: int | None = None

    @classmethod
    def from_domain(cls, route: RouteDeparture) -> "RouteDepartureResponse":
        return cls(
            line=route.line,
            departure_instant=route.departure_instant,
            raw_text=route.raw_text,
            time_zone=route.time_zone,
            epoch_seconds=route.epoch_seconds,
        )


class EnrichedStationResponse(_CamelModel):
    """One station as exposed to clients: station fields plus enrichment."""

    id: str
    name: str
    coordinates: CoordinatesResponse
    description: str
    routes: list[RouteDepartureResponse]
    next_departure: RouteDepartureResponse | None
    distance_from_reference: float | None
    enrichment_error: str | None = None

    @classmethod
    def from_domain(cls, station: EnrichedStation) -> "EnrichedStationResponse":
        return cls(
            id=station.id,
            name=station.name,
            coordinates=CoordinatesResponse(
                lat=station.station.latitude, lng=station.station.longitude
            ),
            description=station.station.description,
            routes=[RouteDepartureResponse.from_domain(route) for route in station.routes],
            next_departure=(
                RouteDepartureResponse.from_domain(station.next_departure)
                if station.next_departure
                else None
            ),
            distance_from_reference=station.distance_km,
            enrichment_error=station.enrichment_error,
        )


def serialize_stations(stations: Sequence[EnrichedStation]) -> list[dict]:
    """Serialize stations to JSON-compatible dicts with camelCase keys."""
    return [
        EnrichedStationResponse.from_domain(station).model_dump(mode="json", by_alias=True)
        for station in stations
    ]

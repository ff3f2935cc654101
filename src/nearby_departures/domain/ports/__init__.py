"""Ports (interfaces) for the ports-and-adapters architecture."""

from nearby_departures.domain.ports.geocoder import Geocoder
from nearby_departures.domain.ports.station_repository import StationRepository
from nearby_departures.domain.ports.station_search import ClientStationSearch
from nearby_departures.domain.ports.transit_repository import TransitRepository

__all__ = [
    "ClientStationSearch",
    "Geocoder",
    "StationRepository",
    "TransitRepository",
]

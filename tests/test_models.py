"""Tests for domain models."""

import math
from dataclasses import FrozenInstanceError
from datetime import UTC, datetime, timedelta

import pytest

from nearby_departures.domain.exceptions import InvalidCoordinateError, InvalidInputError
from nearby_departures.domain.models import (
    Coordinates,
    EnrichedStation,
    ErrorDetails,
    ResultFilter,
    RouteDeparture,
    SearchResult,
    Station,
)


def test_station_creation() -> None:
    """Given station data, when creating a Station, then all fields are set correctly."""
    station = Station(
        id="ChIJ-station-1",
        name="Broad St & Lumpkin St",
        coordinates=Coordinates(33.9577, -83.3753),
        description="Broad St, Athens",
    )

    assert station.id == "ChIJ-station-1"
    assert station.name == "Broad St & Lumpkin St"
    assert station.latitude == 33.9577
    assert station.longitude == -83.3753
    assert station.description == "Broad St, Athens"


def test_station_without_description_uses_placeholder() -> None:
    """Given no description, when creating a Station, then the placeholder text is used."""
    station = Station(id="s1", name="Stop", coordinates=Coordinates(0.0, 0.0))

    assert station.description == "No description available"


def test_station_is_frozen() -> None:
    """Given a Station, when trying to modify it, then raises FrozenInstanceError."""
    station = Station(id="s1", name="Stop", coordinates=Coordinates(0.0, 0.0))

    with pytest.raises(FrozenInstanceError):
        station.name = "Other"  # type: ignore[misc]


@pytest.mark.parametrize(
    ("latitude", "longitude"),
    [(90.5, 0.0), (-91.0, 0.0), (0.0, 180.5), (0.0, -181.0), (math.nan, 0.0), (0.0, math.inf)],
)
def test_coordinates_out_of_range_raise(latitude: float, longitude: float) -> None:
    """Given out-of-range or non-finite values, when creating Coordinates, then raises."""
    with pytest.raises(InvalidCoordinateError):
        Coordinates(latitude, longitude)


def test_coordinates_boundaries_are_valid() -> None:
    """Given boundary values, when creating Coordinates, then they are accepted."""
    assert Coordinates(90.0, 180.0).latitude == 90.0
    assert Coordinates(-90.0, -180.0).longitude == -180.0


def test_coordinates_error_is_a_value_error() -> None:
    """Given invalid coordinates, when catching ValueError, then the error is caught."""
    with pytest.raises(ValueError):
        Coordinates(100.0, 0.0)


def test_coordinates_query_value() -> None:
    """Given coordinates, when formatting for the maps API, then uses "lat,lng"."""
    assert Coordinates(33.9519, -83.3777).as_query_value() == "33.9519,-83.3777"


def test_route_departure_departs_after() -> None:
    """Given parsed and unparsed routes, when comparing with now, then only later parsed ones match."""
    now = datetime(2026, 10, 18, 12, 0, tzinfo=UTC)
    later = RouteDeparture(line="10", departure_instant=now + timedelta(minutes=1), raw_text="")
    same = RouteDeparture(line="10", departure_instant=now, raw_text="")
    unparsed = RouteDeparture(line="10", departure_instant=None, raw_text="soon")

    assert later.departs_after(now) is True
    assert same.departs_after(now) is False
    assert unparsed.departs_after(now) is False
    assert unparsed.is_parsed is False


def test_enriched_station_with_distance_returns_copy() -> None:
    """Given an enriched station, when attaching a distance, then the original is unchanged."""
    station = EnrichedStation(
        station=Station(id="s1", name="Stop", coordinates=Coordinates(0.0, 0.0))
    )

    with_distance = station.with_distance(1.5)

    assert with_distance.distance_km == 1.5
    assert station.distance_km is None
    assert with_distance.id == "s1"
    assert with_distance.name == "Stop"


def test_enriched_station_failure_flag() -> None:
    """Given an enrichment error, when checking the station, then it reports failure."""
    station = EnrichedStation(
        station=Station(id="s1", name="Stop", coordinates=Coordinates(0.0, 0.0)),
        enrichment_error="timeout",
    )

    assert station.enrichment_failed is True
    assert station.routes == ()
    assert station.next_departure is None


@pytest.mark.parametrize("distance", [-1.0, math.nan, math.inf])
def test_result_filter_rejects_invalid_distance(distance: float) -> None:
    """Given a negative or non-finite distance threshold, when creating a filter, then raises."""
    with pytest.raises(InvalidInputError):
        ResultFilter(max_distance_km=distance)


def test_result_filter_is_empty() -> None:
    """Given filters with and without criteria, when checking emptiness, then reports correctly."""
    assert ResultFilter().is_empty is True
    assert ResultFilter(name_contains="").is_empty is True
    assert ResultFilter(max_distance_km=0.0).is_empty is False
    assert ResultFilter(name_contains="campus").is_empty is False


def test_search_result_degraded_and_refiltered() -> None:
    """Given a result with a failed station, when refiltering, then the base sequence is shared."""
    ok = EnrichedStation(station=Station(id="a", name="A", coordinates=Coordinates(0.0, 0.0)))
    failed = EnrichedStation(
        station=Station(id="b", name="B", coordinates=Coordinates(0.0, 0.0)),
        enrichment_error="boom",
    )
    result = SearchResult(
        location="Athens, GA",
        origin=Coordinates(33.9519, -83.3577),
        reference=None,
        evaluated_at=datetime(2026, 10, 18, tzinfo=UTC),
        stations=(ok, failed),
        visible=(ok, failed),
    )

    narrowed = result.refiltered(ResultFilter(name_contains="a"), (ok,))

    assert result.degraded is True
    assert narrowed.stations is result.stations
    assert narrowed.visible == (ok,)
    assert result.visible == (ok, failed)


def test_error_details_body() -> None:
    """Given error details with and without reason, when building the body, then keys match."""
    assert ErrorDetails(error="Geocoding failed").to_body() == {"error": "Geocoding failed"}
    assert ErrorDetails(status_code=400, error="Invalid request", reason="bad").to_body() == {
        "error": "Invalid request",
        "reason": "bad",
    }

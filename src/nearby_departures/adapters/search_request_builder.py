"""Builds SearchRequest objects from loosely typed client input."""

from collections.abc import Mapping

from nearby_departures.domain.exceptions import InvalidInputError
from nearby_departures.domain.models import Coordinates, ResultFilter, SearchRequest


def _parse_float(name: str, value: str | float | None) -> float | None:
    """Parse an optional float, treating blank strings as missing."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got {value!r}") from e


def build_search_request(
    location: str | None = None,
    ref_lat: str | float | None = None,
    ref_lng: str | float | None = None,
    max_distance_km: str | float | None = None,
    name_contains: str | None = None,
) -> SearchRequest:
    """Build a validated search request.

    Raises:
        InvalidInputError: Non-numeric values, or only one half of the reference pair.
        InvalidCoordinateError: Reference coordinate out of range.
    """
    latitude = _parse_float("ref_lat", ref_lat)
    longitude = _parse_float("ref_lng", ref_lng)
    if (latitude is None) != (longitude is None):
        raise InvalidInputError("ref_lat and ref_lng must be given together")

    reference = Coordinates(latitude, longitude) if latitude is not None else None
    name = name_contains.strip() if name_contains else None

    return SearchRequest(
        location=location,
        reference=reference,
        result_filter=ResultFilter(
            max_distance_km=_parse_float("max_distance_km", max_distance_km),
            name_contains=name or None,
        ),
    )


def search_request_from_query(params: Mapping[str, str]) -> SearchRequest:
    """Build a search request from HTTP query parameters."""
    return build_search_request(
        location=params.get("location"),
        ref_lat=params.get("ref_lat"),
        ref_lng=params.get("ref_lng"),
        max_distance_km=params.get("max_distance_km"),
        name_contains=params.get("name_contains"),
    )

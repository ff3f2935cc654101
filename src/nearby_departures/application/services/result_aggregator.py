"""Merging, ordering and filtering of enriched stations."""

import logging
from collections.abc import Sequence

from nearby_departures.domain.distance import distance_km
from nearby_departures.domain.models import Coordinates, EnrichedStation, ResultFilter

logger = logging.getLogger(__name__)


def station_sort_key(station: EnrichedStation) -> tuple[int, float]:
    """Sort key by next departure; stations without one go last."""
    if station.next_departure is None or station.next_departure.departure_instant is None:
        return (1, 0.0)
    return (0, station.next_departure.departure_instant.timestamp())


class ResultAggregator:
    """Builds the ordered station sequence and derives filtered views from it."""

    def aggregate(
        self,
        stations: Sequence[EnrichedStation],
        reference: Coordinates | None = None,
    ) -> tuple[EnrichedStation, ...]:
        """Attach distances and order stations by their next departure.

        Ties keep the original station order, so the result is deterministic.
        """
        with_distance = [
            station.with_distance(
                distance_km(reference, station.station.coordinates) if reference else None
            )
            for station in stations
        ]
        return tuple(sorted(with_distance, key=station_sort_key))

    def apply_filter(
        self,
        stations: Sequence[EnrichedStation],
        result_filter: ResultFilter,
    ) -> tuple[EnrichedStation, ...]:
        """Return the stations matching the filter, in their existing order.

        The input sequence is never modified.
        """
        if result_filter.is_empty:
            return tuple(stations)

        needle = result_filter.name_contains.casefold() if result_filter.name_contains else None
        visible = tuple(
            station
            for station in stations
            if self._within_distance(station, result_filter.max_distance_km)
            and (needle is None or needle in station.name.casefold())
        )
        logger.debug(f"Filter {result_filter} kept {len(visible)} of {len(stations)} station(s)")
        return visible

    @staticmethod
    def _within_distance(station: EnrichedStation, max_distance_km: float | None) -> bool:
        if max_distance_km is None:
            return True
        return station.distance_km is not None and station.distance_km <= max_distance_km

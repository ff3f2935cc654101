"""Per-station transit enrichment with isolated failures."""

import asyncio
import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import TYPE_CHECKING, Any

from nearby_departures.application.services.departure_time_normalizer import (
    DepartureTimeNormalizer,
)
from nearby_departures.domain.models import Coordinates, EnrichedStation, RouteDeparture, Station

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from nearby_departures.domain.ports import TransitRepository

UNKNOWN_LINE = "Unknown line"
TIMEOUT_REASON = "timeout"


def route_sort_key(route: RouteDeparture) -> tuple[int, float]:
    """Sort key placing parsed departures by instant and unparsable ones last."""
    if route.departure_instant is None:
        return (1, 0.0)
    return (0, route.departure_instant.timestamp())


def order_routes(routes: Iterable[RouteDeparture]) -> tuple[RouteDeparture, ...]:
    """Order routes ascending by departure instant.

    Unparsable entries go last and keep their relative input order (sorted() is stable).
    """
    return tuple(sorted(routes, key=route_sort_key))


def find_next_departure(
    ordered_routes: Sequence[RouteDeparture], now: datetime
) -> RouteDeparture | None:
    """Return the first route departing strictly after now, or None."""
    for route in ordered_routes:
        if route.departs_after(now):
            return route
    return None


class TransitEnricher:
    """Attaches transit departures to stations, one concurrent lookup per station."""

    def __init__(
        self,
        transit_repository: "TransitRepository",
        normalizer: DepartureTimeNormalizer,
        timeout_seconds: float = 5.0,
        max_concurrency: int = 10,
    ) -> None:
        """Initialize the enricher.

        Args:
            transit_repository: Source of transit directions.
            normalizer: Converts provider departure times into instants.
            timeout_seconds: Per-station time budget before it counts as a soft failure.
            max_concurrency: Maximum number of simultaneous upstream lookups.
        """
        self._transit_repository = transit_repository
        self._normalizer = normalizer
        self._timeout_seconds = timeout_seconds
        self._max_concurrency = max(1, max_concurrency)

    def now(self) -> datetime:
        """Return the evaluation instant from the normalizer clock."""
        return self._normalizer.now()

    async def enrich(
        self, station: Station, origin: Coordinates, now: datetime
    ) -> EnrichedStation:
        """Enrich a single station. Errors from the repository propagate."""
        steps = await self._transit_repository.get_transit_steps(origin, station.coordinates)
        routes = order_routes(self.parse_transit_steps(steps, now))
        return EnrichedStation(
            station=station,
            routes=routes,
            next_departure=find_next_departure(routes, now),
        )

    async def enrich_all(
        self, stations: Sequence[Station], origin: Coordinates, now: datetime | None = None
    ) -> list[EnrichedStation]:
        """Enrich all stations concurrently, in input order.

        Every lookup settles on its own: a failing or slow station comes back
        with empty routes and an enrichment error instead of failing the batch.
        Cancelling the caller cancels all lookups still in flight.
        """
        if not stations:
            return []

        evaluated_at = now or self.now()
        semaphore = asyncio.Semaphore(self._max_concurrency)
        logger.debug(f"Enriching {len(stations)} station(s) from {origin.as_query_value()}")
        results = await asyncio.gather(
            *(
                self._enrich_isolated(station, origin, evaluated_at, semaphore)
                for station in stations
            )
        )

        failed = sum(1 for result in results if result.enrichment_failed)
        if failed:
            logger.warning(f"Transit enrichment failed for {failed} of {len(results)} station(s)")
        return list(results)

    async def _enrich_isolated(
        self,
        station: Station,
        origin: Coordinates,
        now: datetime,
        semaphore: asyncio.Semaphore,
    ) -> EnrichedStation:
        """Enrich one station, converting any failure into a degraded result."""
        async with semaphore:
            try:
                return await asyncio.wait_for(
                    self.enrich(station, origin, now), timeout=self._timeout_seconds
                )
            except asyncio.TimeoutError:
                logger.warning(
                    f"Transit lookup for station {station.id} ({station.name}) timed out "
                    f"after {self._timeout_seconds}s"
                )
                return EnrichedStation(station=station, enrichment_error=TIMEOUT_REASON)
            except Exception as e:
                logger.warning(
                    f"Transit lookup for station {station.id} ({station.name}) failed: {e}",
                    exc_info=True,
                )
                return EnrichedStation(
                    station=station, enrichment_error=str(e) or e.__class__.__name__
                )

    def parse_transit_steps(
        self, steps: Iterable[dict[str, Any]], now: datetime
    ) -> list[RouteDeparture]:
        """Build route departures from transit_details payloads, keeping their order."""
        return [self._parse_transit_step(step, now) for step in steps if isinstance(step, dict)]

    def _parse_transit_step(self, details: dict[str, Any], now: datetime) -> RouteDeparture:
        """Build a single route departure from one transit_details payload."""
        line_data = details.get("line")
        if not isinstance(line_data, dict):
            line_data = {}
        line = line_data.get("short_name") or line_data.get("name") or UNKNOWN_LINE

        departure_time = details.get("departure_time")
        if not isinstance(departure_time, dict):
            departure_time = {}
        raw_text = str(departure_time.get("text") or "")
        time_zone = departure_time.get("time_zone")
        if not isinstance(time_zone, str) or not time_zone:
            time_zone = None
        epoch_value = departure_time.get("value")
        epoch_seconds = (
            epoch_value
            if isinstance(epoch_value, (int, float)) and not isinstance(epoch_value, bool)
            else None
        )

        return RouteDeparture(
            line=str(line),
            departure_instant=self._normalizer.normalize(
                raw_text, epoch_seconds=epoch_seconds, time_zone=time_zone, now=now
            ),
            raw_text=raw_text,
            time_zone=time_zone,
            epoch_seconds=int(epoch_seconds) if epoch_seconds is not None else None,
        )

"""Search request and result domain models."""

from dataclasses import dataclass, field, replace
from datetime import datetime

from nearby_departures.domain.models.coordinates import Coordinates
from nearby_departures.domain.models.enriched_station import EnrichedStation
from nearby_departures.domain.models.result_filter import ResultFilter


@dataclass(frozen=True)
class SearchRequest:
    """One search as requested by a client."""

    location: str | None = None  # Falls back to the configured default place
    reference: Coordinates | None = None  # Point distances are measured from
    result_filter: ResultFilter = field(default_factory=ResultFilter)


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one pipeline invocation.

    ``stations`` is the full ordered base sequence; ``visible`` is the filtered
    view derived from it and never replaces it.
    """

    location: str
    origin: Coordinates
    reference: Coordinates | None
    evaluated_at: datetime
    stations: tuple[EnrichedStation, ...]
    visible: tuple[EnrichedStation, ...]
    result_filter: ResultFilter = field(default_factory=ResultFilter)

    @property
    def degraded(self) -> bool:
        return any(station.enrichment_failed for station in self.stations)

    def refiltered(
        self, result_filter: ResultFilter, visible: tuple[EnrichedStation, ...]
    ) -> "SearchResult":
        """Return a copy sharing the same base sequence with a new filtered view."""
        return replace(self, result_filter=result_filter, visible=visible)

"""Route departure domain model."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RouteDeparture:
    """A single scheduled transit line visit at a station."""

    line: str
    departure_instant: datetime | None  # None when the provider time could not be parsed
    raw_text: str
    time_zone: str | None = None
    epoch_seconds: int | None = None

    @property
    def is_parsed(self) -> bool:
        return self.departure_instant is not None

    def departs_after(self, instant: datetime) -> bool:
        """Check whether this departure is strictly after the given instant."""
        return self.departure_instant is not None and self.departure_instant > instant

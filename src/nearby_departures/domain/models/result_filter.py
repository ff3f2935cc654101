"""Result filter domain model."""

import math
from dataclasses import dataclass

from nearby_departures.domain.exceptions import InvalidInputError


@dataclass(frozen=True)
class ResultFilter:
    """Client-side narrowing of a search result.

    Both criteria are optional; an empty filter keeps every station.
    """

    max_distance_km: float | None = None
    name_contains: str | None = None

    def __post_init__(self) -> None:
        """Validate the distance threshold."""
        if self.max_distance_km is not None and (
            not math.isfinite(self.max_distance_km) or self.max_distance_km < 0
        ):
            raise InvalidInputError(
                f"max_distance_km must be finite and non-negative, got {self.max_distance_km}"
            )

    @property
    def is_empty(self) -> bool:
        return self.max_distance_km is None and not self.name_contains

"""Exceptions raised by the station search pipeline."""


class NearbyDeparturesError(Exception):
    """Base exception for nearby departures errors."""


class UpstreamUnavailableError(NearbyDeparturesError):
    """Raised when a maps provider returns a non-success status or cannot be reached."""

    def __init__(self, message: str, status: str | None = None) -> None:
        super().__init__(message)
        self.status = status


class GeocodeError(UpstreamUnavailableError):
    """Raised when a location cannot be resolved to coordinates."""


class LocatorError(UpstreamUnavailableError):
    """Raised when the nearby station search fails."""


class TransitLookupError(UpstreamUnavailableError):
    """Raised when transit directions for a single station cannot be fetched."""


class InvalidInputError(NearbyDeparturesError, ValueError):
    """Raised when query input is malformed or incomplete."""


class InvalidCoordinateError(InvalidInputError):
    """Raised when a latitude or longitude is out of range."""


class SearchSupersededError(NearbyDeparturesError):
    """Raised when a newer search replaced the one being awaited."""

    def __init__(self, generation: int) -> None:
        super().__init__(f"Search #{generation} was superseded by a newer search")
        self.generation = generation

"""Web adapter exposing the station search over HTTP."""

from nearby_departures.adapters.web.app import StationSearchApi, create_app

__all__ = ["StationSearchApi", "create_app"]

"""Starlette application exposing the station search as JSON."""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import aiohttp
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.routing import Route

from nearby_departures.adapters.search_request_builder import search_request_from_query
from nearby_departures.adapters.serialization import serialize_stations
from nearby_departures.domain.exceptions import (
    GeocodeError,
    InvalidInputError,
    LocatorError,
    SearchSupersededError,
)
from nearby_departures.domain.models import ErrorDetails

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from nearby_departures.adapters.config import AppConfig
    from nearby_departures.domain.ports import ClientStationSearch

    SearchFactory = Callable[[AppConfig, ClientSession], ClientStationSearch]

GEOCODE_FAILED = ErrorDetails(status_code=500, error="Geocoding failed")
LOCATOR_FAILED = ErrorDetails(
    status_code=500, error="Failed to fetch bus stops from the maps provider"
)
SEARCH_SUPERSEDED = ErrorDetails(status_code=409, error="Search superseded")
INTERNAL_ERROR = ErrorDetails(status_code=500, error="Internal Server Error")


def error_response(details: ErrorDetails) -> JSONResponse:
    """Build a JSON error response from error details."""
    return JSONResponse(details.to_body(), status_code=details.status_code)


class StationSearchApi:
    """HTTP handlers for the station search."""

    def __init__(self, search: "ClientStationSearch") -> None:
        """Initialize with the search backing the endpoint."""
        self.search = search

    async def stations(self, request: Request) -> Response:
        """GET /api/stations - search, enrich, sort and filter stations.

        Query parameters: location, ref_lat, ref_lng, max_distance_km,
        name_contains, client (searches sharing a client id supersede each other).
        """
        try:
            search_request = search_request_from_query(request.query_params)
        except InvalidInputError as e:
            return error_response(
                ErrorDetails(status_code=400, error="Invalid request", reason=str(e))
            )

        client_id = request.query_params.get("client") or None
        try:
            result = await self.search.search(search_request, client_id=client_id)
        except GeocodeError as e:
            logger.warning(f"Geocoding failed: {e}")
            return error_response(GEOCODE_FAILED)
        except LocatorError as e:
            logger.warning(f"Station search failed: {e}")
            return error_response(LOCATOR_FAILED)
        except SearchSupersededError as e:
            logger.info(f"{e} (client {client_id})")
            return error_response(SEARCH_SUPERSEDED)
        except Exception:
            logger.exception("Error searching stations")
            return error_response(INTERNAL_ERROR)

        return JSONResponse(
            serialize_stations(result.visible),
            headers={"X-Degraded": "true" if result.degraded else "false"},
        )


def create_app(
    config: "AppConfig",
    search_factory: "SearchFactory | None" = None,
    search: "ClientStationSearch | None" = None,
) -> Starlette:
    """Create the Starlette application.

    Either pass a ready ``search`` (tests), or a ``search_factory`` that is
    called at startup with the config and a fresh aiohttp session; the session
    is closed at shutdown.
    """
    if search is None and search_factory is None:
        raise ValueError("create_app needs either search or search_factory")

    api_holder: dict[str, StationSearchApi] = {}
    if search is not None:
        api_holder["api"] = StationSearchApi(search)

    async def stations(request: Request) -> Response:
        return await api_holder["api"].stations(request)

    async def healthz(_request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return Response(content="Ok", media_type="text/plain")

    @asynccontextmanager
    async def lifespan(_app: Starlette) -> AsyncIterator[None]:
        if search_factory is None:
            yield
            await api_holder["api"].search.cancel_all()
            return

        timeout = aiohttp.ClientTimeout(total=config.http_timeout_seconds)
        async with aiohttp.ClientSession(timeout=timeout) as session:
            api_holder["api"] = StationSearchApi(search_factory(config, session))
            logger.info("Station search API ready")
            yield
            await api_holder["api"].search.cancel_all()

    return Starlette(
        routes=[
            Route("/api/stations", stations, methods=["GET"]),
            Route("/healthz", healthz, methods=["GET"]),
        ],
        lifespan=lifespan,
    )

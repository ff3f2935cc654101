"""HTTP client for the Google Maps web services."""

import asyncio
import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from nearby_departures.adapters.api_request_logger import log_api_request
from nearby_departures.adapters.google_maps.constants import DEFAULT_HEADERS
from nearby_departures.domain.exceptions import UpstreamUnavailableError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class MapsHttpClient:
    """Thin aiohttp wrapper adding the API key and translating transport errors."""

    def __init__(
        self,
        session: "ClientSession | None",
        api_key: str,
        base_url: str = "https://maps.googleapis.com/maps/api",
        timeout_seconds: float = 10.0,
    ) -> None:
        """Initialize the client.

        Args:
            session: aiohttp session shared by all maps requests.
            api_key: Google Maps API key sent as the ``key`` parameter.
            base_url: Base URL of the web services.
            timeout_seconds: Total timeout for each request.
        """
        self._session = session
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get_json(
        self,
        path: str,
        params: dict[str, str | int],
        error_cls: type[UpstreamUnavailableError] = UpstreamUnavailableError,
    ) -> dict[str, Any]:
        """GET a maps endpoint and return the decoded JSON document.

        The provider ``status`` field is not interpreted here.

        Raises:
            error_cls: On network errors, timeouts, HTTP errors or non-JSON bodies.
        """
        if self._session is None:
            raise RuntimeError("Maps API requires an aiohttp session")

        url = f"{self._base_url}{path}"
        request_params = {**params, "key": self._api_key}
        log_api_request("GET", url, params=request_params, headers=DEFAULT_HEADERS)

        try:
            async with self._session.get(
                url, params=request_params, headers=DEFAULT_HEADERS, timeout=self._timeout
            ) as response:
                return await self._handle_response(response, path, error_cls)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning(f"Error calling maps API {path}: {e!r}")
            raise error_cls(f"Maps API request to {path} failed: {e!r}") from e

    async def _handle_response(
        self,
        response: "ClientResponse",
        path: str,
        error_cls: type[UpstreamUnavailableError],
    ) -> dict[str, Any]:
        """Check the HTTP status and decode the body."""
        if response.status != 200:
            response_text = await response.text()
            logger.error(
                f"Maps API returned status {response.status} for {path}: {response_text[:200]}"
            )
            raise error_cls(
                f"Maps API returned HTTP {response.status} for {path}",
                status=f"HTTP_{response.status}",
            )

        try:
            data = await response.json(content_type=None)
        except ValueError as e:
            raise error_cls(f"Maps API returned invalid JSON for {path}") from e

        if not isinstance(data, dict):
            raise error_cls(f"Maps API returned unexpected payload for {path}")
        return data

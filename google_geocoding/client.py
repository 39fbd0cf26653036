"""
Google Geocoding API Async Client

This module provides the Connection class: it renders a query to a request
URL, sends it through httpx and decodes the JSON reply into a Reply.
"""

import json
import logging
import os
from typing import Any, Dict, Optional, Union

import httpx

from .constants import (
    API_BASE_URL,
    API_KEY_ENV_VAR,
    CONTENT_TYPE_JSON,
    DEFAULT_TIMEOUT,
    PARAM_KEY,
    PARAM_LANGUAGE,
    VERSION,
)
from .coordinates import Coordinates
from .enums import Language, StatusCode
from .exceptions import ConfigurationError, DecodeError, TransportError, parseStatusError
from .models import Reply
from .query import DegeocodeQuery, GeocodeQuery, QueryParams, toDegeocodeQuery, toGeocodeQuery

logger = logging.getLogger(__name__)


class Connection:
    """Async connection to the Google Geocoding API, dood!

    Returns the full API reply. There is no caching and no retrying: every
    call is one HTTP request, and every failure is raised to the caller.
    Concurrent calls share nothing but the underlying httpx client.

    Example:
        >>> async with Connection(apiKey="your_api_key") as connection:
        ...     reply = await connection.geocode("1600 Amphitheater Parkway, Mountain View, CA")
        ...     for candidate in reply:
        ...         print(f"{candidate.formatted_address}: {candidate.geometry.location}")

    Args:
        apiKey: API key (default: value of GOOGLE_GEOCODING_API_KEY, if any)
        baseUrl: Geocoding endpoint URL
        requestTimeout: HTTP request timeout in seconds, enforced by httpx (default: 30)
        defaultLanguage: Language for queries which don't set one (default: None)
        transport: httpx transport to send requests through (default: httpx's own)
    """

    __slots__ = (
        "apiKey",
        "baseUrl",
        "requestTimeout",
        "defaultLanguage",
        "transport",
        "_httpClient",
    )

    def __init__(
        self,
        apiKey: Optional[str] = None,
        *,
        baseUrl: str = API_BASE_URL,
        requestTimeout: Optional[float] = DEFAULT_TIMEOUT,
        defaultLanguage: Optional[Language] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if apiKey is None:
            apiKey = os.getenv(API_KEY_ENV_VAR)
        self.apiKey = apiKey.strip() if apiKey else None
        self.baseUrl = baseUrl
        self.requestTimeout = requestTimeout
        self.defaultLanguage = defaultLanguage
        self.transport = transport
        self._httpClient: Optional[httpx.AsyncClient] = None

        if self.apiKey is None:
            logger.warning("No API key configured, requests will be sent without one")
        logger.debug(f"Connection initialized for {self.baseUrl}")

    @classmethod
    def fromConfig(cls, config: Dict[str, Any], **kwargs: Any) -> "Connection":
        """Create a connection from the ``[geocoding]`` configuration section.

        Args:
            config: Section with optional ``api-key``, ``base-url``, ``timeout`` and ``language`` keys
            **kwargs: Extra constructor arguments (e.g. ``transport``)
        """
        language = config.get("language")
        try:
            defaultLanguage = Language(language) if language else None
        except ValueError as e:
            raise ConfigurationError(f"Unknown language '{language}' in geocoding config") from e
        return cls(
            apiKey=config.get("api-key"),
            baseUrl=config.get("base-url", API_BASE_URL),
            requestTimeout=config.get("timeout", DEFAULT_TIMEOUT),
            defaultLanguage=defaultLanguage,
            **kwargs,
        )

    async def __aenter__(self) -> "Connection":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    def _getHttpClient(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._httpClient is None or self._httpClient.is_closed:
            self._httpClient = httpx.AsyncClient(
                timeout=httpx.Timeout(self.requestTimeout),
                headers={
                    "Accept": CONTENT_TYPE_JSON,
                    "User-Agent": f"google-geocoding/{VERSION}",
                },
                transport=self.transport,
            )
            logger.debug("Created new HTTP client")
        return self._httpClient

    async def aclose(self) -> None:
        """Close the HTTP client and cleanup resources."""
        if self._httpClient and not self._httpClient.is_closed:
            await self._httpClient.aclose()
            logger.debug("HTTP client closed")

    async def geocode(self, query: Union[str, GeocodeQuery]) -> Reply:
        """Get the coordinates of an address.

        Args:
            query: Address or a GeocodeQuery

        Returns:
            The full reply; empty (status ZERO_RESULTS) if nothing matched

        Raises:
            TransportError: The request failed on the network or HTTP level
            DecodeError: The reply is not a valid geocoding reply
            ServiceStatusError: The service reported an error status
        """
        return await self._get(toGeocodeQuery(query).toParams())

    async def degeocode(self, query: Union[Coordinates, DegeocodeQuery]) -> Reply:
        """Get the addresses at some coordinates.

        Args:
            query: Coordinates or a DegeocodeQuery

        Returns:
            The full reply; empty (status ZERO_RESULTS) if nothing matched

        Raises:
            TransportError, DecodeError, ServiceStatusError: see geocode()
        """
        return await self._get(toDegeocodeQuery(query).toParams())

    def buildUrl(self, query: Union[GeocodeQuery, DegeocodeQuery]) -> httpx.URL:
        """Build the request URL for a query, with all parameters percent-encoded."""
        return self._buildUrl(query.toParams())

    def _buildUrl(self, params: QueryParams) -> httpx.URL:
        params = list(params)
        if self.defaultLanguage is not None and not any(name == PARAM_LANGUAGE for name, _ in params):
            params.append((PARAM_LANGUAGE, str(self.defaultLanguage)))
        if self.apiKey:
            params.append((PARAM_KEY, self.apiKey))
        return httpx.URL(self.baseUrl, params=params)

    async def _get(self, params: QueryParams) -> Reply:
        """Perform one request and decode its reply."""
        url = self._buildUrl(params)
        # Never log the key
        logger.debug(f"Making request to {self.baseUrl} with params: {params}")
        body = await self._fetch(url)
        return self._decodeReply(body)

    async def _fetch(self, url: httpx.URL) -> bytes:
        """Send a GET request and return the raw body.

        Raises:
            TransportError: For timeouts, network errors and non-200 statuses
        """
        client = self._getHttpClient()
        try:
            response = await client.get(url)
        except httpx.TimeoutException as e:
            logger.error(f"Request timeout: {type(e).__name__}#{e}")
            raise TransportError(f"Request timeout: {type(e).__name__}#{e}") from e
        except httpx.RequestError as e:
            logger.error(f"Network error: {type(e).__name__}#{e}")
            raise TransportError(f"Network error: {type(e).__name__}#{e}") from e

        if response.status_code != 200:
            logger.error(f"API request failed: {response.status_code}")
            logger.debug(f"Response text: {response.text}")
            raise TransportError(
                f"HTTP error {response.status_code}",
                code=str(response.status_code),
                httpStatus=response.status_code,
            )

        logger.debug(f"API request successful: {response.status_code}")
        return response.content

    def _decodeReply(self, body: bytes) -> Reply:
        """Decode a reply body, raising for error statuses.

        ZERO_RESULTS is a successful, empty reply.
        """
        try:
            data = json.loads(body)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.error(f"Failed to parse JSON response: {e}")
            raise DecodeError(f"Invalid JSON response: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("status"), str):
            raise DecodeError("Reply is not an object with a status", response=data if isinstance(data, dict) else None)

        status = data["status"]
        try:
            isSuccess = StatusCode(status).isSuccess
        except ValueError:
            isSuccess = False
        if not isSuccess:
            error = parseStatusError(status, data)
            logger.warning(f"Geocoding API returned {status}: {error.message}")
            raise error

        try:
            reply = Reply.from_dict(data)
        except DecodeError as e:
            e.response = data
            raise

        if reply.status == StatusCode.ZERO_RESULTS:
            logger.debug("No results")
        return reply

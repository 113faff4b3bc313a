"""OpenWeatherMap API client."""

import asyncio
import logging
from typing import Optional

import httpx

from weather_gateway.models import WeatherData
from weather_gateway.services.errors import (
    BadRequestError,
    DecodingError,
    InvalidAPIKeyError,
    ServiceUnavailableError,
    UnexpectedStatusCodeError,
    UpstreamTimeoutError,
)
from weather_gateway.services.url_builder import build_openweathermap_url

logger = logging.getLogger(__name__)

# Upper bound for a whole upstream call (connect, send and read)
REQUEST_TIMEOUT = 5.0


class OpenWeatherClient:
    """Client for the OpenWeatherMap current weather API.

    Makes exactly one attempt per call; retrying is left to the caller.
    """

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.timeout = timeout
        self._transport = transport

    async def _get(self, url: str) -> httpx.Response:
        """Make GET request to OpenWeatherMap."""
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport, follow_redirects=True
        ) as client:
            return await client.get(url)

    async def fetch_weather(
        self,
        lat: str,
        lon: str,
        api_key: Optional[str],
        base_url: str,
        unit_of_measurement: str,
    ) -> WeatherData:
        """
        Fetch current weather for a coordinate pair.

        Raises a subclass of OpenWeatherError describing the failure:
        BadRequestError for a missing API key, a malformed base URL or an
        upstream 400; InvalidAPIKeyError on 401; ServiceUnavailableError on
        transport failures and 503; UpstreamTimeoutError when the call runs
        past the timeout; UnexpectedStatusCodeError for any other non-200
        status; DecodingError when the body is not a valid payload.
        """
        if not api_key:
            raise BadRequestError("bad request to OpenWeather API: API key not provided")

        url = build_openweathermap_url(base_url, api_key, lat, lon, unit_of_measurement)
        logger.debug(f"Fetching weather for lat={lat}, lon={lon}")

        # Cancellation of the calling task propagates through wait_for
        try:
            response = await asyncio.wait_for(self._get(url), timeout=self.timeout)
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            raise UpstreamTimeoutError() from e
        except httpx.InvalidURL as e:
            raise BadRequestError(f"bad request to OpenWeather API: {e}") from e
        except httpx.TransportError as e:
            raise ServiceUnavailableError(
                f"OpenWeather API service is unavailable: {e}"
            ) from e

        status = response.status_code
        if status == httpx.codes.UNAUTHORIZED:
            raise InvalidAPIKeyError()
        if status == httpx.codes.BAD_REQUEST:
            raise BadRequestError()
        if status == httpx.codes.SERVICE_UNAVAILABLE:
            raise ServiceUnavailableError()
        if status != httpx.codes.OK:
            raise UnexpectedStatusCodeError(status)

        # pydantic's ValidationError and json's JSONDecodeError are both ValueErrors
        try:
            return WeatherData.model_validate(response.json())
        except ValueError as e:
            raise DecodingError(f"error decoding response from OpenWeather API: {e}") from e

"""Weather API endpoints."""

import asyncio
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.responses import Response

from weather_gateway.config import Settings
from weather_gateway.middleware import GateChain, GatewayRequest
from weather_gateway.models import WeatherData, WeatherResponse
from weather_gateway.responses import error_response
from weather_gateway.services.errors import (
    BadRequestError,
    DecodingError,
    InvalidAPIKeyError,
    OpenWeatherError,
    ServiceUnavailableError,
    UnexpectedStatusCodeError,
)
from weather_gateway.services.openweather_client import OpenWeatherClient
from weather_gateway.services.temperature import categorize_temperature, convert_to_fahrenheit

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Weather"])

MISSING_COORDINATES_MESSAGE = "Missing required query parameters: lat and/or lon"
UNKNOWN_CONDITION = "Unknown"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred."
PROCESSING_ERROR_MESSAGE = "An error occurred while processing your request."

# Checked in order; anything not listed (including timeouts) is a 500
ERROR_RESPONSES = (
    ((InvalidAPIKeyError,), 401, "Invalid API key."),
    ((BadRequestError,), 400, "Bad request to OpenWeather API."),
    ((ServiceUnavailableError,), 503, "OpenWeather API service is unavailable."),
    ((UnexpectedStatusCodeError, DecodingError), 500, PROCESSING_ERROR_MESSAGE),
)


def map_weather_data_to_response(data: WeatherData, unit_of_measurement: str) -> WeatherResponse:
    """Map an OpenWeatherMap payload to the gateway's response model."""
    condition = UNKNOWN_CONDITION
    if data.weather and data.weather[0].main:
        condition = data.weather[0].main

    temp_fahrenheit = convert_to_fahrenheit(data.main.temp, unit_of_measurement)
    return WeatherResponse(
        weather_condition=condition,
        temp_category=categorize_temperature(temp_fahrenheit),
    )


def weather_error_response(error: Exception) -> Response:
    """Translate a client failure into a status code and a fixed message."""
    for error_types, status_code, message in ERROR_RESPONSES:
        if isinstance(error, error_types):
            return error_response(message, status_code)
    return error_response(UNEXPECTED_ERROR_MESSAGE, 500)


async def wait_for_disconnect(request: Request) -> None:
    """Return once the client has gone away."""
    while True:
        message = await request.receive()
        if message["type"] == "http.disconnect":
            return


class WeatherHandler:
    """Terminal handler of the gate chain for GET /api/v1/weather."""

    def __init__(self, client: OpenWeatherClient, settings: Settings):
        self.client = client
        self.settings = settings

    async def _fetch_while_connected(
        self, request: GatewayRequest, lat: str, lon: str
    ) -> WeatherData:
        """
        Fetch weather, abandoning the upstream call if the client disconnects.

        A disconnect cancels the outstanding upstream request and is reported
        as ServiceUnavailableError.
        """
        fetch = asyncio.ensure_future(
            self.client.fetch_weather(
                lat,
                lon,
                request.credential,
                self.settings.openweathermap_api_url,
                self.settings.unit_of_measurement,
            )
        )
        disconnect = asyncio.ensure_future(wait_for_disconnect(request.request))
        try:
            await asyncio.wait({fetch, disconnect}, return_when=asyncio.FIRST_COMPLETED)
        finally:
            # No-ops for whichever task already finished
            fetch.cancel()
            disconnect.cancel()
            await asyncio.wait({fetch, disconnect})

        if fetch.cancelled():
            logger.info("Client disconnected, upstream request cancelled")
            raise ServiceUnavailableError("client disconnected before OpenWeather API answered")
        return fetch.result()

    async def __call__(self, request: GatewayRequest) -> Response:
        query = request.request.query_params
        lat = query.get("lat", "")
        lon = query.get("lon", "")
        if not lat or not lon:
            return error_response(MISSING_COORDINATES_MESSAGE, 400)

        try:
            data = await self._fetch_while_connected(request, lat, lon)
        except OpenWeatherError as e:
            logger.warning(f"OpenWeatherMap request failed ({type(e).__name__}): {e}")
            return weather_error_response(e)
        except Exception:
            logger.exception("Unexpected error while fetching weather")
            return error_response(UNEXPECTED_ERROR_MESSAGE, 500)

        response = map_weather_data_to_response(data, self.settings.unit_of_measurement)
        return JSONResponse(response.model_dump(by_alias=True))


def get_gate_chain(request: Request) -> GateChain:
    """Get the application's gate chain."""
    return request.app.state.gate_chain


@router.get("/weather")
async def get_weather_condition_by_coordinates(
    request: Request,
    chain: GateChain = Depends(get_gate_chain),
):
    """
    Get the current weather condition and temperature category.

    Query parameters: lat, lon. The caller's OpenWeatherMap API key goes in
    the X-API-Key header.
    """
    return await chain.dispatch(request)

"""OpenWeatherMap request URL construction."""

import httpx

from weather_gateway.services.errors import MalformedURLError


def build_openweathermap_url(
    base_url: str, api_key: str, lat: str, lon: str, unit_of_measurement: str
) -> str:
    """
    Build the full OpenWeatherMap request URL.

    Sets lat, lon, appid and units on the base URL, replacing any values for
    those keys already present. Other query parameters are kept. Parameters
    are emitted sorted by key so the same inputs always give the same URL.

    Raises MalformedURLError if the base URL cannot be parsed. A URL without
    a scheme parses fine and is left for the transport to refuse.
    """
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as e:
        raise MalformedURLError(f"error parsing base URL: {e}") from e

    params = url.params
    for key, value in (
        ("lat", lat),
        ("lon", lon),
        ("appid", api_key),
        ("units", unit_of_measurement),
    ):
        params = params.set(key, value)

    ordered = sorted(params.multi_items(), key=lambda item: item[0])
    return str(url.copy_with(params=httpx.QueryParams(ordered)))

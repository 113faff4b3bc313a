"""Service modules."""

from weather_gateway.services.openweather_client import OpenWeatherClient
from weather_gateway.services.temperature import categorize_temperature, convert_to_fahrenheit
from weather_gateway.services.url_builder import build_openweathermap_url

__all__ = [
    "OpenWeatherClient",
    "categorize_temperature",
    "convert_to_fahrenheit",
    "build_openweathermap_url",
]

"""Weather Gateway - OpenWeatherMap proxy with temperature categories."""

__version__ = "1.0.0"

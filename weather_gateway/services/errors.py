"""Errors raised by the OpenWeatherMap client."""

from typing import Optional


class OpenWeatherError(Exception):
    """Base class for OpenWeatherMap client failures."""


class BadRequestError(OpenWeatherError):
    """The request to OpenWeatherMap could not be made or was rejected as bad."""

    def __init__(self, message: str = "bad request to OpenWeather API"):
        super().__init__(message)


class MalformedURLError(BadRequestError):
    """The configured OpenWeatherMap base URL could not be parsed."""


class InvalidAPIKeyError(OpenWeatherError):
    def __init__(self, message: str = "invalid OpenWeatherMap API key"):
        super().__init__(message)


class ServiceUnavailableError(OpenWeatherError):
    def __init__(self, message: str = "OpenWeather API service is unavailable"):
        super().__init__(message)


class UpstreamTimeoutError(OpenWeatherError):
    def __init__(self, message: str = "request to OpenWeather API timed out"):
        super().__init__(message)


class UnexpectedStatusCodeError(OpenWeatherError):
    """OpenWeatherMap answered with a status the client does not handle."""

    def __init__(self, status_code: int, message: Optional[str] = None):
        self.status_code = status_code
        super().__init__(
            message or f"unexpected status code from OpenWeather API: {status_code}"
        )


class DecodingError(OpenWeatherError):
    def __init__(self, message: str = "error decoding response from OpenWeather API"):
        super().__init__(message)

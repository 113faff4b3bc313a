"""Application configuration from environment variables."""

from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

# Reasonable defaults
DEFAULT_PORT = 8080
DEFAULT_RATE_LIMIT_PER_SECOND = 5
DEFAULT_OPENWEATHERMAP_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_UNIT_OF_MEASUREMENT = "imperial"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Empty or zero values fall back to the defaults above, so every field is
    populated once the instance exists. Instances are frozen.
    """

    # Server
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT

    # Rate limiting (global, requests per second)
    rate_limit_per_second: int = Field(DEFAULT_RATE_LIMIT_PER_SECOND, gt=0)

    # OpenWeatherMap API
    openweathermap_api_url: str = DEFAULT_OPENWEATHERMAP_URL
    # metric (Celsius), standard (Kelvin), imperial (Fahrenheit)
    unit_of_measurement: str = DEFAULT_UNIT_OF_MEASUREMENT

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("port", mode="before")
    @classmethod
    def _default_port(cls, value: Any) -> Any:
        if value in (None, "", 0, "0"):
            return DEFAULT_PORT
        return value

    @field_validator("rate_limit_per_second", mode="before")
    @classmethod
    def _default_rate_limit(cls, value: Any) -> Any:
        if value in (None, "", 0, "0"):
            return DEFAULT_RATE_LIMIT_PER_SECOND
        return value

    @field_validator("openweathermap_api_url", mode="before")
    @classmethod
    def _default_api_url(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return DEFAULT_OPENWEATHERMAP_URL
        return value

    @field_validator("unit_of_measurement", mode="before")
    @classmethod
    def _default_unit(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return DEFAULT_UNIT_OF_MEASUREMENT
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def _default_log_level(cls, value: Any) -> Any:
        if value is None or not str(value).strip():
            return "INFO"
        return str(value).strip().upper()

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        frozen = True
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

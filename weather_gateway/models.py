"""Pydantic models for the upstream payload and API responses."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field


# --- OpenWeatherMap API Models (for parsing responses) ---

class MainInfo(BaseModel):
    """Main block of the OpenWeatherMap payload."""
    # Temperature in the requested unit of measurement; numbers only
    temp: float = Field(0.0, strict=True)


class WeatherCondition(BaseModel):
    """Single weather condition from OpenWeatherMap."""
    # Main weather condition (e.g. Clear, Clouds, Rain)
    main: str = ""


class WeatherData(BaseModel):
    """Decoded current-weather response.

    Only the two fields the gateway consumes are kept; anything else in the
    payload is ignored. Missing fields fall back to their zero values.
    """
    main: MainInfo = Field(default_factory=MainInfo)
    weather: List[WeatherCondition] = Field(default_factory=list)


# --- Gateway Response Models ---

class WeatherResponse(BaseModel):
    """Weather summary returned to the client."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    weather_condition: str = Field(alias="weatherCondition")
    temp_category: str = Field(alias="tempCategory")

"""Weather Gateway - Main FastAPI application."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from weather_gateway import __version__
from weather_gateway.config import Settings, get_settings
from weather_gateway.middleware import RateLimiter, build_gate_chain
from weather_gateway.routers import weather_router
from weather_gateway.routers.weather import WeatherHandler
from weather_gateway.services.openweather_client import OpenWeatherClient

# Configure logging
settings = get_settings()
logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
# httpx logs full request URLs at INFO, and those carry the caller's API key
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    config: Settings = app.state.settings
    logger.info(f"Starting Weather Gateway v{__version__}")
    logger.info(
        f"Upstream: {config.openweathermap_api_url} "
        f"(units={config.unit_of_measurement}, "
        f"rate limit={config.rate_limit_per_second}/s)"
    )

    yield

    logger.info("Weather Gateway stopped")


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[OpenWeatherClient] = None,
) -> FastAPI:
    """
    Build the application.

    One rate limiter, one OpenWeatherMap client and one handler are created
    per application and shared by every request.
    """
    settings = settings or get_settings()
    client = client or OpenWeatherClient()

    app = FastAPI(
        title="Weather Gateway",
        description="Current weather condition and temperature category by coordinates",
        version=__version__,
        lifespan=lifespan,
    )

    handler = WeatherHandler(client, settings)
    app.state.settings = settings
    app.state.gate_chain = build_gate_chain(
        RateLimiter(settings.rate_limit_per_second), handler
    )

    app.include_router(weather_router, prefix="/api/v1")
    return app


app = create_app(settings)


def run():
    """Run the server on the configured host and port."""
    logger.info(f"Starting server on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()

# ABOUTME: Dependency container for the weather endpoint using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and OpenWeather settings read from the environment.

import os

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class WeatherDeps(BaseModel):
    """Dependencies handed to the endpoint and passed on to the weather service."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    api_key: str = ""
    units: str = "metric"


def create_http_client() -> httpx.AsyncClient:
    """Create an httpx client with the request timeout from WEATHER_HTTP_TIMEOUT (seconds).

    Raises ValueError naming the variable when the value is not a positive number.
    """
    raw = os.environ.get("WEATHER_HTTP_TIMEOUT", "10")
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"WEATHER_HTTP_TIMEOUT must be a number of seconds, got {raw!r}") from None
    if timeout <= 0:
        raise ValueError(f"WEATHER_HTTP_TIMEOUT must be positive, got {raw!r}")
    return httpx.AsyncClient(timeout=timeout)


def load_deps() -> WeatherDeps:
    """Build WeatherDeps from OPENWEATHER_API_KEY and OPENWEATHER_UNITS."""
    return WeatherDeps(
        http_client=create_http_client(),
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
        units=os.environ.get("OPENWEATHER_UNITS", "metric"),
    )

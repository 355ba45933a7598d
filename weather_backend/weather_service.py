# ABOUTME: Service layer for OpenWeather current-weather calls and response parsing.
# ABOUTME: Populates a WeatherResponse field by field from the provider payload.

import logging

import httpx

from weather_backend.models import WeatherResponse
from weather_backend.validation import check_ranges

logger = logging.getLogger(__name__)

CURRENT_WEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class CityNotFoundError(Exception):
    """The provider has no weather for the requested city."""

    def __init__(self, city: str):
        super().__init__(f"City not found: {city}")
        self.city = city


class ProviderResponseError(Exception):
    """The provider answered successfully but with a body that cannot be parsed."""


async def fetch_current_weather(
    client: httpx.AsyncClient,
    city: str,
    api_key: str,
    units: str = "metric",
) -> WeatherResponse:
    """Fetch current weather for a city name from OpenWeather.

    With ``units="metric"`` temperature is in °C, wind speed in m/s, pressure in hPa
    and visibility in whole kilometres.
    """
    if not city or not city.strip():
        raise ValueError("city must not be blank")

    resp = await client.get(CURRENT_WEATHER_URL, params={"q": city.strip(), "appid": api_key, "units": units})
    if resp.status_code == 404:
        raise CityNotFoundError(city)
    resp.raise_for_status()

    try:
        weather = parse_current_weather(resp.json())
    except (ValueError, TypeError, AttributeError, KeyError, IndexError) as e:
        raise ProviderResponseError(f"Unreadable weather payload for '{city}': {e}") from e
    issues = check_ranges(weather)
    if issues:
        logger.warning("Suspicious weather for %s: %s", city, "; ".join(issues))
    return weather


def parse_current_weather(data: dict) -> WeatherResponse:
    """Map an OpenWeather current-weather payload onto a WeatherResponse.

    Parts missing from the payload are left unset and keep their zero value.
    """
    weather = WeatherResponse()
    main = data.get("main") or {}
    wind = data.get("wind") or {}
    conditions = data.get("weather") or []

    if data.get("name"):
        weather.city = data["name"]
    if (data.get("sys") or {}).get("country"):
        weather.country = data["sys"]["country"]
    if main.get("temp") is not None:
        weather.temperature = float(main["temp"])
    if main.get("humidity") is not None:
        weather.humidity = int(main["humidity"])
    if main.get("pressure") is not None:
        weather.pressure = int(main["pressure"])
    if wind.get("speed") is not None:
        weather.wind_speed = float(wind["speed"])
    if data.get("visibility") is not None:
        # metres to whole kilometres
        weather.visibility = int(data["visibility"]) // 1000
    if conditions and conditions[0].get("main"):
        weather.condition = conditions[0]["main"]

    return weather

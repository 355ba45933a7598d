# ABOUTME: ASGI web entry point exposing the current-weather endpoint.
# ABOUTME: Creates a Starlette app serving GET /api/weather?city=<name> as a wire WeatherResponse.

import logging
from contextlib import asynccontextmanager

import httpx
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from weather_backend.deps import WeatherDeps, load_deps
from weather_backend.weather_service import CityNotFoundError, ProviderResponseError, fetch_current_weather

logger = logging.getLogger(__name__)

MISSING_CITY_MESSAGE = "Please enter a city name"
NOT_FOUND_MESSAGE = "City not found"
UPSTREAM_MESSAGE = "Weather provider unavailable"


def create_app(deps: WeatherDeps) -> Starlette:
    """Build the Starlette app with its dependencies bound to the endpoint."""

    async def get_weather(request: Request) -> JSONResponse:
        city = request.query_params.get("city", "").strip()
        if not city:
            return JSONResponse({"error": MISSING_CITY_MESSAGE}, status_code=400)

        try:
            weather = await fetch_current_weather(deps.http_client, city, deps.api_key, deps.units)
        except CityNotFoundError:
            logger.info("No weather found for %r", city)
            return JSONResponse({"error": NOT_FOUND_MESSAGE}, status_code=404)
        except (httpx.HTTPError, ProviderResponseError):
            logger.exception("Weather provider request failed for %r", city)
            return JSONResponse({"error": UPSTREAM_MESSAGE}, status_code=502)

        return JSONResponse(weather.to_wire())

    @asynccontextmanager
    async def lifespan(app: Starlette):
        yield
        await deps.http_client.aclose()

    return Starlette(
        routes=[Route("/api/weather", get_weather, methods=["GET"])],
        lifespan=lifespan,
    )


app = create_app(load_deps())

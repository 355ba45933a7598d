# ABOUTME: Range checks for populated WeatherResponse objects.
# ABOUTME: Validates a copy against a constrained Pydantic model and reports violations as messages.

from typing import Annotated

from pydantic import BaseModel, Field, ValidationError

from weather_backend.models import WeatherResponse

NonEmptyText = Annotated[str, Field(min_length=1)]


class CheckedWeather(BaseModel):
    """Expected ranges for a plausible current-weather reading."""

    city: NonEmptyText
    country: NonEmptyText
    temperature: Annotated[float, Field(allow_inf_nan=False)]
    humidity: Annotated[int, Field(ge=0, le=100)]
    pressure: Annotated[int, Field(ge=800, le=1100)]
    wind_speed: Annotated[float, Field(ge=0.0, allow_inf_nan=False)]
    visibility: Annotated[int, Field(ge=0)]
    condition: NonEmptyText


def check_ranges(weather: WeatherResponse) -> list[str]:
    """List the readings in a WeatherResponse that fall outside their expected range.

    The response itself is never modified and nothing is raised.
    """
    try:
        CheckedWeather.model_validate(weather.model_dump())
    except ValidationError as exc:
        return [_describe(error) for error in exc.errors()]
    return []


def _describe(error: dict) -> str:
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}={error['input']!r}: {error['msg']}"

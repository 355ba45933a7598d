# ABOUTME: Pydantic BaseModel for the normalized current-weather response.
# ABOUTME: Plain mutable value object with zero defaults and camelCase wire names.

from pydantic import BaseModel, ConfigDict, Field


class WeatherResponse(BaseModel):
    """Snapshot of current weather conditions for a named location.

    Every field defaults to its zero value and accepts any value on assignment.
    Range checking is left to whoever populates the instance, see
    ``weather_backend.validation.check_ranges``.
    """

    model_config = ConfigDict(populate_by_name=True)

    city: str = ""
    country: str = ""
    temperature: float = 0.0
    humidity: int = 0
    pressure: int = 0
    wind_speed: float = Field(default=0.0, alias="windSpeed")
    visibility: int = 0
    condition: str = ""

    def unset_fields(self) -> list[str]:
        """Return the fields never supplied, whose zero value means "unknown"."""
        return [name for name in type(self).model_fields if name not in self.model_fields_set]

    def to_wire(self) -> dict:
        """Serialize to the JSON object clients receive, keyed by wire names."""
        return self.model_dump(by_alias=True)

    @classmethod
    def from_wire(cls, data: dict) -> "WeatherResponse":
        """Build an instance from a wire object; missing keys keep their zero value."""
        return cls.model_validate(data)

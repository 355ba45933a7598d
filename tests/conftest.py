# ABOUTME: Shared test fixtures for the weather backend test suite.
# ABOUTME: Provides a sample OpenWeather payload and mock HTTP client factory.

from unittest.mock import AsyncMock

import httpx
import pytest


@pytest.fixture
def paris_payload() -> dict:
    """OpenWeather current-weather payload for Paris in metric units."""
    return {
        "name": "Paris",
        "sys": {"country": "FR"},
        "main": {"temp": 18.5, "humidity": 60, "pressure": 1013},
        "wind": {"speed": 4.2},
        "visibility": 10000,
        "weather": [{"main": "Clear", "description": "clear sky"}],
    }


@pytest.fixture
def mock_client():
    """Return a factory for mock httpx.AsyncClients answering with the given JSON."""

    def _make(json_data: dict, status_code: int = 200) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.return_value = httpx.Response(
            status_code=status_code, json=json_data, request=httpx.Request("GET", "https://test")
        )
        return mock

    return _make

"""Pytest configuration and shared fixtures."""

from collections.abc import Callable
from datetime import date, timedelta
from typing import Any
from unittest.mock import AsyncMock

import pytest

from weatherapi_client.client import WeatherAPIClient

START_EPOCH = 1704067200  # 2024-01-01T00:00:00Z


def _condition(text: str = "Partly cloudy") -> dict[str, Any]:
    return {"text": text, "icon": "//cdn.weatherapi.com/weather/64x64/day/116.png", "code": 1003}


@pytest.fixture
def mock_transport():
    """Mock HttpTransport; set get_text.return_value or side_effect per test."""
    transport = AsyncMock()
    transport.get_text = AsyncMock()
    return transport


@pytest.fixture
def client(mock_transport):
    """WeatherAPIClient wired to the mock transport."""
    return WeatherAPIClient("test-api-key", use_https=True, transport=mock_transport)


@pytest.fixture
def air_quality_block() -> dict[str, Any]:
    """Raw ``current.air_quality`` block."""
    return {
        "co": 230.3,
        "no2": 13.5,
        "o3": 54.3,
        "so2": 2.1,
        "pm2_5": 6.4,
        "pm10": 8.9,
        "us-epa-index": 1,
        "gb-defra-index": 1,
    }


@pytest.fixture
def current_block(air_quality_block) -> dict[str, Any]:
    """Raw ``current`` block including air quality."""
    return {
        "last_updated_epoch": START_EPOCH,
        "last_updated": "2024-01-01 01:00",
        "temp_c": 4.0,
        "temp_f": 39.2,
        "is_day": 0,
        "condition": _condition(),
        "wind_mph": 9.4,
        "wind_kph": 15.1,
        "wind_degree": 250,
        "wind_dir": "WSW",
        "pressure_mb": 1017.0,
        "pressure_in": 30.03,
        "precip_mm": 0.1,
        "precip_in": 0.0,
        "humidity": 87,
        "cloud": 75,
        "feelslike_c": 0.5,
        "feelslike_f": 32.9,
        "vis_km": 10.0,
        "vis_miles": 6.0,
        "uv": 1.0,
        "gust_mph": 15.2,
        "gust_kph": 24.5,
        "air_quality": air_quality_block,
    }


@pytest.fixture
def current_response(current_block) -> dict[str, Any]:
    """Response of current.json for Berlin."""
    return {
        "location": {
            "name": "Berlin",
            "region": "Berlin",
            "country": "Germany",
            "lat": 52.52,
            "lon": 13.4,
            "tz_id": "Europe/Berlin",
            "localtime_epoch": START_EPOCH,
            "localtime": "2024-01-01 1:00",
        },
        "current": current_block,
    }


@pytest.fixture
def forecast_response_factory() -> Callable[..., dict[str, Any]]:
    """Build a forecast.json response with ``days`` days of 24 hourly entries."""

    def factory(days: int, hours_per_day: int = 24) -> dict[str, Any]:
        forecastday = []
        for day_index in range(days):
            hours = [
                {
                    "time_epoch": START_EPOCH + (day_index * 24 + hour) * 3600,
                    "time": f"{date(2024, 1, 1) + timedelta(days=day_index)} {hour:02d}:00",
                    "temp_c": 2.0 + hour * 0.25,
                    "is_day": 1 if 8 <= hour < 17 else 0,
                    "condition": _condition("Overcast"),
                    "wind_kph": 10.0 + hour,
                    "wind_degree": 240,
                    "wind_dir": "WSW",
                    "pressure_mb": 1015.0,
                    "precip_mm": 0.0,
                    "humidity": 80,
                    "cloud": 100,
                    "feelslike_c": -1.0,
                    "chance_of_rain": 10,
                    "chance_of_snow": 0,
                }
                for hour in range(hours_per_day)
            ]
            forecastday.append(
                {
                    "date": (date(2024, 1, 1) + timedelta(days=day_index)).isoformat(),
                    "date_epoch": START_EPOCH + day_index * 86400,
                    "day": {
                        "maxtemp_c": 6.0 + day_index,
                        "mintemp_c": 1.0 + day_index,
                        "avgtemp_c": 3.5 + day_index,
                        "maxwind_kph": 20.2,
                        "totalprecip_mm": 1.2,
                        "avghumidity": 84,
                        "daily_chance_of_rain": 70,
                        "daily_chance_of_snow": 0,
                        "condition": _condition("Patchy rain nearby"),
                        "uv": 1.0,
                    },
                    "astro": {"sunrise": "08:17 AM", "sunset": "04:02 PM"},
                    "hour": hours,
                }
            )
        return {"location": {"name": "Berlin"}, "forecast": {"forecastday": forecastday}}

    return factory


@pytest.fixture
def ip_lookup_response() -> dict[str, Any]:
    """Response of ip.json."""
    return {
        "ip": "203.0.113.7",
        "type": "ipv4",
        "continent_code": "EU",
        "continent_name": "Europe",
        "country_code": "DE",
        "country_name": "Germany",
        "is_eu": "true",
        "geoname_id": 2950159,
        "city": "Berlin",
        "region": "Land Berlin",
        "lat": 52.52,
        "lon": 13.4,
        "tz_id": "Europe/Berlin",
        "localtime_epoch": START_EPOCH,
        "localtime": "2024-01-01 1:00",
    }


@pytest.fixture
def error_response() -> dict[str, Any]:
    """WeatherAPI error envelope for an unknown location."""
    return {"error": {"code": 1006, "message": "No matching location found."}}

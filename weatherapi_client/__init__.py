"""Async client for the WeatherAPI.com weather service"""

from importlib.metadata import PackageNotFoundError, version

from weatherapi_client.client import WeatherAPIClient
from weatherapi_client.models import (
    AirQuality,
    CurrentConditions,
    DailyForecast,
    HourlyForecast,
    LocationData,
    WeatherResult,
)

try:
    __version__ = version("weatherapi-client")
except PackageNotFoundError:
    __version__ = "dev"

__all__ = [
    "WeatherAPIClient",
    "WeatherResult",
    "AirQuality",
    "CurrentConditions",
    "DailyForecast",
    "HourlyForecast",
    "LocationData",
]

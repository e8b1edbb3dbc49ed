"""WeatherAPI client models"""

from weatherapi_client.models.base_models import WeatherResult
from weatherapi_client.models.forecast import DailyForecast, HourlyForecast
from weatherapi_client.models.location import LocationData
from weatherapi_client.models.weather import AirQuality, CurrentConditions

__all__ = [
    "WeatherResult",
    "AirQuality",
    "CurrentConditions",
    "DailyForecast",
    "HourlyForecast",
    "LocationData",
]

"""Pydantic models for daily and hourly forecasts."""

import datetime as dt

from weatherapi_client.models.api_responses import ForecastDayInfo, HourInfo
from weatherapi_client.models.base_models import WeatherResult, celsius_to_fahrenheit
from weatherapi_client.models.weather import icon_url


class DailyForecast(WeatherResult):
    """Aggregate forecast for one calendar day.

    Forecast requests never ask for air quality, so there is no AirQuality here.
    Sunrise and sunset are the service's local-time strings (e.g. "07:12 AM",
    or "No sunrise" in polar regions).
    """

    date: dt.date | None = None
    max_temperature_celsius: float = 0.0
    min_temperature_celsius: float = 0.0
    avg_temperature_celsius: float = 0.0
    max_wind_kph: float = 0.0
    total_precipitation_mm: float = 0.0
    avg_humidity: float = 0.0
    chance_of_rain: int = 0
    chance_of_snow: int = 0
    uv_index: float = 0.0
    condition_text: str = ""
    condition_icon: str = ""
    sunrise: str = ""
    sunset: str = ""

    @property
    def max_temperature_fahrenheit(self) -> float:
        return celsius_to_fahrenheit(self.max_temperature_celsius)

    @property
    def min_temperature_fahrenheit(self) -> float:
        return celsius_to_fahrenheit(self.min_temperature_celsius)

    @property
    def avg_temperature_fahrenheit(self) -> float:
        return celsius_to_fahrenheit(self.avg_temperature_celsius)

    @property
    def icon_url(self) -> str:
        return icon_url(self.condition_icon)

    @classmethod
    def from_api(cls, data: ForecastDayInfo) -> "DailyForecast":
        """Create DailyForecast from one ``forecast.forecastday`` entry.

        Raises:
            ValueError: If the date is not an ISO date
        """
        day = data.day
        return cls(
            valid=True,
            date=dt.date.fromisoformat(data.date),
            max_temperature_celsius=day.maxtemp_c,
            min_temperature_celsius=day.mintemp_c,
            avg_temperature_celsius=day.avgtemp_c,
            max_wind_kph=day.maxwind_kph,
            total_precipitation_mm=day.totalprecip_mm,
            avg_humidity=day.avghumidity,
            chance_of_rain=day.daily_chance_of_rain,
            chance_of_snow=day.daily_chance_of_snow,
            uv_index=day.uv,
            condition_text=day.condition.text,
            condition_icon=day.condition.icon,
            sunrise=data.astro.sunrise,
            sunset=data.astro.sunset,
        )

    def __str__(self) -> str:
        if not self.valid:
            return "DailyForecast(invalid)"
        return (
            f"{self.date}: {self.condition_text}, {self.min_temperature_celsius}-{self.max_temperature_celsius}°C "
            f"(avg {self.avg_temperature_celsius}°C), max wind {self.max_wind_kph} kph, "
            f"precipitation {self.total_precipitation_mm} mm, humidity {self.avg_humidity}%, "
            f"sunrise {self.sunrise}, sunset {self.sunset}"
        )


class HourlyForecast(WeatherResult):
    """Forecast for a single hour."""

    time: dt.datetime | None = None
    temperature_celsius: float = 0.0
    feels_like_celsius: float = 0.0
    condition_text: str = ""
    condition_icon: str = ""
    wind_kph: float = 0.0
    wind_degree: int = 0
    wind_direction: str = ""
    humidity: int = 0
    precipitation_mm: float = 0.0
    chance_of_rain: int = 0
    chance_of_snow: int = 0
    is_day: bool = False

    @property
    def temperature_fahrenheit(self) -> float:
        return celsius_to_fahrenheit(self.temperature_celsius)

    @property
    def icon_url(self) -> str:
        return icon_url(self.condition_icon)

    @classmethod
    def from_api(cls, data: HourInfo) -> "HourlyForecast":
        """Create HourlyForecast from one ``forecastday[].hour[]`` entry."""
        return cls(
            valid=True,
            time=dt.datetime.fromtimestamp(data.time_epoch, tz=dt.UTC),
            temperature_celsius=data.temp_c,
            feels_like_celsius=data.feelslike_c,
            condition_text=data.condition.text,
            condition_icon=data.condition.icon,
            wind_kph=data.wind_kph,
            wind_degree=data.wind_degree,
            wind_direction=data.wind_dir,
            humidity=data.humidity,
            precipitation_mm=data.precip_mm,
            chance_of_rain=data.chance_of_rain,
            chance_of_snow=data.chance_of_snow,
            is_day=bool(data.is_day),
        )

    def __str__(self) -> str:
        if not self.valid or self.time is None:
            return "HourlyForecast(invalid)"
        return (
            f"{self.time.isoformat()}: {self.condition_text}, {self.temperature_celsius}°C, "
            f"wind {self.wind_kph} kph {self.wind_direction}, humidity {self.humidity}%, "
            f"chance of rain {self.chance_of_rain}%"
        )

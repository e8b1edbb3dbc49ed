"""Pydantic models mirroring the raw WeatherAPI.com JSON schema.

Required fields are the ones every response of the endpoint carries; a
response missing one of them fails validation. Unknown fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class ApiModel(BaseModel):
    """Base for raw API models."""

    model_config = ConfigDict(extra="ignore")


class ConditionInfo(ApiModel):
    """Weather condition block (``condition``)."""

    text: str
    icon: str = ""
    code: int = 0


class AirQualityInfo(ApiModel):
    """Air quality block (``current.air_quality``)."""

    co: float
    o3: float
    no2: float
    so2: float
    pm2_5: float
    pm10: float
    us_epa_index: int = Field(alias="us-epa-index")
    gb_defra_index: int = Field(alias="gb-defra-index")


class CurrentInfo(ApiModel):
    """Current conditions block (``current``)."""

    last_updated_epoch: int
    temp_c: float
    is_day: int = 0
    condition: ConditionInfo
    wind_kph: float
    wind_degree: int = 0
    wind_dir: str = ""
    pressure_mb: float = 0.0
    precip_mm: float = 0.0
    humidity: int = 0
    cloud: int = 0
    feelslike_c: float = 0.0
    vis_km: float = 0.0
    uv: float = 0.0
    gust_kph: float = 0.0
    air_quality: AirQualityInfo | None = None


class CurrentResponse(ApiModel):
    """Response of ``current.json``."""

    current: CurrentInfo


class DayInfo(ApiModel):
    """Daily aggregate block (``forecastday[].day``)."""

    maxtemp_c: float
    mintemp_c: float
    avgtemp_c: float
    maxwind_kph: float
    totalprecip_mm: float = 0.0
    avghumidity: float = 0.0
    daily_chance_of_rain: int = 0
    daily_chance_of_snow: int = 0
    uv: float = 0.0
    condition: ConditionInfo


class AstroInfo(ApiModel):
    """Astronomy block (``forecastday[].astro``)."""

    sunrise: str = ""
    sunset: str = ""


class HourInfo(ApiModel):
    """Hourly slice (``forecastday[].hour[]``)."""

    time_epoch: int
    temp_c: float
    is_day: int = 0
    condition: ConditionInfo
    wind_kph: float
    wind_degree: int = 0
    wind_dir: str = ""
    precip_mm: float = 0.0
    humidity: int = 0
    feelslike_c: float = 0.0
    chance_of_rain: int = 0
    chance_of_snow: int = 0


class ForecastDayInfo(ApiModel):
    """One entry of ``forecast.forecastday``."""

    date: str
    day: DayInfo
    astro: AstroInfo = Field(default_factory=AstroInfo)
    hour: list[HourInfo] = Field(default_factory=list)


class ForecastInfo(ApiModel):
    """Forecast block (``forecast``)."""

    forecastday: list[ForecastDayInfo]


class ForecastResponse(ApiModel):
    """Response of ``forecast.json``."""

    current: CurrentInfo | None = None
    forecast: ForecastInfo


class IpLookupResponse(ApiModel):
    """Response of ``ip.json``."""

    ip: str
    type: str = ""
    continent_name: str = ""
    country_code: str = ""
    country_name: str = ""
    region: str = ""
    city: str = ""
    lat: float
    lon: float
    tz_id: str = ""

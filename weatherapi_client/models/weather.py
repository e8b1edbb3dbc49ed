"""Pydantic models for current conditions and air quality."""

from datetime import UTC, datetime

from pydantic import Field

from weatherapi_client.models.api_responses import AirQualityInfo, CurrentInfo
from weatherapi_client.models.base_models import WeatherResult, celsius_to_fahrenheit

US_EPA_INDEX_MEANINGS: dict[int, str] = {
    1: "Good",
    2: "Moderate",
    3: "Unhealthy for sensitive group",
    4: "Unhealthy",
    5: "Very Unhealthy",
    6: "Hazardous",
}

GB_DEFRA_INDEX_MEANINGS: dict[int, str] = {
    1: "Low",
    2: "Low",
    3: "Low",
    4: "Moderate",
    5: "Moderate",
    6: "Moderate",
    7: "High",
    8: "High",
    9: "High",
    10: "Very High",
}


def icon_url(icon: str) -> str:
    """Turn WeatherAPI's protocol-relative icon path into an absolute URL."""
    if icon.startswith("//"):
        return f"https:{icon}"
    return icon


class AirQuality(WeatherResult):
    """Air quality readings in µg/m³ plus US EPA and UK DEFRA index categories.

    Stays invalid and zero-valued when air quality was not requested.
    """

    carbon_monoxide: float = 0.0
    ozone: float = 0.0
    nitrogen_dioxide: float = 0.0
    sulphur_dioxide: float = 0.0
    pm2_5: float = 0.0
    pm10: float = 0.0
    us_epa_index: int = 0
    gb_defra_index: int = 0
    us_epa_meaning: str = ""
    gb_defra_meaning: str = ""

    @classmethod
    def from_api(cls, data: AirQualityInfo) -> "AirQuality":
        """Create AirQuality from the raw ``air_quality`` block.

        Args:
            data: Validated air quality block

        Returns:
            Valid AirQuality with index meanings resolved from the lookup tables
        """
        return cls(
            valid=True,
            carbon_monoxide=data.co,
            ozone=data.o3,
            nitrogen_dioxide=data.no2,
            sulphur_dioxide=data.so2,
            pm2_5=data.pm2_5,
            pm10=data.pm10,
            us_epa_index=data.us_epa_index,
            gb_defra_index=data.gb_defra_index,
            us_epa_meaning=US_EPA_INDEX_MEANINGS.get(data.us_epa_index, ""),
            gb_defra_meaning=GB_DEFRA_INDEX_MEANINGS.get(data.gb_defra_index, ""),
        )

    def __str__(self) -> str:
        if not self.valid:
            return "AirQuality(invalid)"
        return (
            f"AirQuality: CO {self.carbon_monoxide}, O3 {self.ozone}, NO2 {self.nitrogen_dioxide}, "
            f"SO2 {self.sulphur_dioxide}, PM2.5 {self.pm2_5}, PM10 {self.pm10}, "
            f"US EPA {self.us_epa_index} ({self.us_epa_meaning}), "
            f"UK DEFRA {self.gb_defra_index} ({self.gb_defra_meaning})"
        )


class CurrentConditions(WeatherResult):
    """Point-in-time weather at a location."""

    last_updated: datetime | None = None
    temperature_celsius: float = 0.0
    feels_like_celsius: float = 0.0
    condition_text: str = ""
    condition_icon: str = ""
    condition_code: int = 0
    wind_kph: float = 0.0
    wind_degree: int = 0
    wind_direction: str = ""
    gust_kph: float = 0.0
    humidity: int = 0
    pressure_mb: float = 0.0
    precipitation_mm: float = 0.0
    cloud: int = 0
    visibility_km: float = 0.0
    uv_index: float = 0.0
    is_day: bool = False
    air_quality: AirQuality = Field(default_factory=AirQuality)

    @property
    def temperature_fahrenheit(self) -> float:
        """Temperature converted to Fahrenheit."""
        return celsius_to_fahrenheit(self.temperature_celsius)

    @property
    def feels_like_fahrenheit(self) -> float:
        """Feels-like temperature converted to Fahrenheit."""
        return celsius_to_fahrenheit(self.feels_like_celsius)

    @property
    def icon_url(self) -> str:
        """Absolute URL of the condition icon."""
        return icon_url(self.condition_icon)

    @classmethod
    def from_api(cls, data: CurrentInfo, include_air_quality: bool = False) -> "CurrentConditions":
        """Create CurrentConditions from the raw ``current`` block.

        Args:
            data: Validated ``current`` block
            include_air_quality: Whether air quality was requested; the embedded
                AirQuality stays invalid when False or when the block is absent

        Returns:
            Valid CurrentConditions
        """
        air_quality = AirQuality()
        if include_air_quality and data.air_quality is not None:
            air_quality = AirQuality.from_api(data.air_quality)

        return cls(
            valid=True,
            last_updated=datetime.fromtimestamp(data.last_updated_epoch, tz=UTC),
            temperature_celsius=data.temp_c,
            feels_like_celsius=data.feelslike_c,
            condition_text=data.condition.text,
            condition_icon=data.condition.icon,
            condition_code=data.condition.code,
            wind_kph=data.wind_kph,
            wind_degree=data.wind_degree,
            wind_direction=data.wind_dir,
            gust_kph=data.gust_kph,
            humidity=data.humidity,
            pressure_mb=data.pressure_mb,
            precipitation_mm=data.precip_mm,
            cloud=data.cloud,
            visibility_km=data.vis_km,
            uv_index=data.uv,
            is_day=bool(data.is_day),
            air_quality=air_quality,
        )

    def __str__(self) -> str:
        if not self.valid:
            return "CurrentConditions(invalid)"
        text = (
            f"{self.condition_text}, {self.temperature_celsius}°C (feels like {self.feels_like_celsius}°C), "
            f"wind {self.wind_kph} kph {self.wind_direction}, humidity {self.humidity}%, "
            f"pressure {self.pressure_mb} mb, precipitation {self.precipitation_mm} mm, UV {self.uv_index}"
        )
        if self.last_updated is not None:
            text = f"{text}, updated {self.last_updated.isoformat()}"
        if self.air_quality.valid:
            text = f"{text}\n{self.air_quality}"
        return text

"""Pydantic model for IP-based geolocation."""

from weatherapi_client.models.api_responses import IpLookupResponse
from weatherapi_client.models.base_models import WeatherResult


class LocationData(WeatherResult):
    """Location of the caller as resolved from its IP address."""

    ip: str = ""
    ip_type: str = ""
    city: str = ""
    region: str = ""
    country: str = ""
    country_code: str = ""
    continent: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    timezone: str = ""

    @property
    def query(self) -> str:
        """Location query ("lat,lon") usable with the weather endpoints."""
        return f"{self.latitude},{self.longitude}"

    @classmethod
    def from_api(cls, data: IpLookupResponse) -> "LocationData":
        """Create LocationData from an ``ip.json`` response."""
        return cls(
            valid=True,
            ip=data.ip,
            ip_type=data.type,
            city=data.city,
            region=data.region,
            country=data.country_name,
            country_code=data.country_code,
            continent=data.continent_name,
            latitude=data.lat,
            longitude=data.lon,
            timezone=data.tz_id,
        )

    def __str__(self) -> str:
        if not self.valid:
            return "LocationData(invalid)"
        return f"{self.ip}: {self.city}, {self.region}, {self.country} ({self.query}) {self.timezone}"

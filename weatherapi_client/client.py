"""Async client for the WeatherAPI.com REST endpoints.

Every public operation issues exactly one GET request. Remote failures
(network errors, non-success status codes, malformed or unexpected JSON)
never raise: they are logged and turned into an invalid result whose
``valid`` flag is False.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import ValidationError

from weatherapi_client import url_builder
from weatherapi_client.config import Settings, get_settings
from weatherapi_client.exceptions import WeatherAPIException, WeatherClientException, WeatherDecodeException
from weatherapi_client.logging_config import get_logger, log_with_context, redact_sensitive_data
from weatherapi_client.models.api_responses import CurrentResponse, ForecastResponse, IpLookupResponse
from weatherapi_client.models.forecast import DailyForecast, HourlyForecast
from weatherapi_client.models.location import LocationData
from weatherapi_client.models.weather import CurrentConditions
from weatherapi_client.protocols import HttpTransport, JsonDecoder
from weatherapi_client.transport import HttpxTransport, decode_json

logger = get_logger(__name__)

T = TypeVar("T")


class WeatherAPIClient:
    """Client for current weather, forecasts and IP lookup.

    The API key and scheme are fixed for the lifetime of the client, and no
    other per-call state is kept, so one instance can be shared between
    concurrent tasks.

    Args:
        api_key: WeatherAPI.com API key
        use_https: Use https (True) or http (False)
        transport: HTTP transport; defaults to an httpx transport opening a
            fresh connection per request
        json_decoder: JSON parser; defaults to the standard library parser
    """

    def __init__(
        self,
        api_key: str,
        use_https: bool = False,
        *,
        transport: HttpTransport | None = None,
        json_decoder: JsonDecoder | None = None,
    ):
        self._api_key = api_key
        self._use_https = use_https
        self._transport: HttpTransport = transport or HttpxTransport()
        self._decode_json: JsonDecoder = json_decoder or decode_json

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        *,
        transport: HttpTransport | None = None,
    ) -> "WeatherAPIClient":
        """Create a client from Settings (defaults to the singleton)."""
        if settings is None:
            settings = get_settings()
        if transport is None:
            transport = HttpxTransport(timeout=settings.timeout_seconds)
        return cls(settings.api_key, settings.use_https, transport=transport)

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def use_https(self) -> bool:
        return self._use_https

    async def get_current_conditions(self, query: str, include_air_quality: bool = False) -> CurrentConditions:
        """Get current weather at ``query``.

        Args:
            query: Location query (city name, "lat,lon", postcode, IP, ...)
            include_air_quality: Also request air quality data

        Returns:
            CurrentConditions; ``valid`` is False if the request failed. The
            embedded AirQuality is only valid when it was requested and returned.
        """
        url = url_builder.build_current_weather_url(self._api_key, self._use_https, query, include_air_quality)

        def decode(tree: Any) -> CurrentConditions:
            response = CurrentResponse.model_validate(tree)
            return CurrentConditions.from_api(response.current, include_air_quality)

        return await self._request(url, decode, CurrentConditions.invalid)

    async def get_daily_forecast(self, query: str, days: int = 3) -> list[DailyForecast]:
        """Get the forecast for the next ``days`` days, starting today.

        Args:
            query: Location query
            days: Number of days to forecast

        Returns:
            List of ``days`` DailyForecast entries in chronological order. If the
            request failed, a single invalid DailyForecast.

        Raises:
            ValueError: If days is negative
        """
        if days < 0:
            raise ValueError(f"days must not be negative (got {days})")
        if days == 0:
            return []

        url = url_builder.build_forecast_url(self._api_key, self._use_https, query, days, False)

        def decode(tree: Any) -> list[DailyForecast]:
            response = ForecastResponse.model_validate(tree)
            forecasts = [DailyForecast.from_api(day) for day in response.forecast.forecastday[:days]]
            return _pad(forecasts, days, DailyForecast.invalid, "daily")

        return await self._request(url, decode, lambda: [DailyForecast.invalid()])

    async def get_hourly_forecast(self, query: str, hours: int = 24) -> list[HourlyForecast]:
        """Get the forecast for the next ``hours`` hours, starting at midnight today.

        Enough whole days are requested to cover ``hours``; the hourly entries
        are flattened in chronological order and cut off at ``hours``.

        Args:
            query: Location query
            hours: Number of hours to forecast

        Returns:
            List of ``hours`` HourlyForecast entries. If the request failed, a
            single invalid HourlyForecast.

        Raises:
            ValueError: If hours is negative
        """
        if hours < 0:
            raise ValueError(f"hours must not be negative (got {hours})")
        if hours == 0:
            return []

        days = url_builder.days_for_hours(hours)
        url = url_builder.build_forecast_url(self._api_key, self._use_https, query, days, False)

        def decode(tree: Any) -> list[HourlyForecast]:
            response = ForecastResponse.model_validate(tree)
            forecasts: list[HourlyForecast] = []
            for forecast_day in response.forecast.forecastday:
                for hour in forecast_day.hour:
                    forecasts.append(HourlyForecast.from_api(hour))
                    if len(forecasts) == hours:
                        return forecasts
            return _pad(forecasts, hours, HourlyForecast.invalid, "hourly")

        return await self._request(url, decode, lambda: [HourlyForecast.invalid()])

    async def get_location_by_ip(self) -> LocationData:
        """Get the caller's location from its public IP address.

        Returns:
            LocationData; ``valid`` is False if the request failed
        """
        url = url_builder.build_ip_lookup_url(self._api_key, self._use_https)

        def decode(tree: Any) -> LocationData:
            return LocationData.from_api(IpLookupResponse.model_validate(tree))

        return await self._request(url, decode, LocationData.invalid)

    async def _request(self, url: str, decode: Callable[[Any], T], fallback: Callable[[], T]) -> T:
        """Fetch ``url``, parse the body and decode it, or return ``fallback()``.

        This is the only place where remote failures are converted into
        invalid results.
        """
        try:
            text = await self._transport.get_text(url)
            return self._decode(text, decode)
        except WeatherClientException as e:
            self._log_failure(url, e)
            return fallback()

    def _decode(self, text: str, decode: Callable[[Any], T]) -> T:
        try:
            tree = self._decode_json(text)
        except (ValueError, RecursionError) as e:
            raise WeatherDecodeException(
                f"Invalid JSON in WeatherAPI response: {e}",
                details={"error_type": "json_error"},
            ) from e

        try:
            return decode(tree)
        except ValidationError as e:
            raise WeatherDecodeException(
                f"Unexpected WeatherAPI response structure: {e.error_count()} validation error(s)",
                details={"error_type": "schema_error", "errors": e.errors(include_url=False, include_input=False)},
            ) from e
        except (ValueError, OverflowError, OSError) as e:
            raise WeatherDecodeException(
                f"Invalid value in WeatherAPI response: {e}",
                details={"error_type": "value_error"},
            ) from e

    def _log_failure(self, url: str, error: WeatherClientException) -> None:
        message = error.message
        if isinstance(error, WeatherAPIException):
            message = error.description

        log_with_context(
            logger,
            "warning",
            message,
            url=redact_sensitive_data(url),
            error=error.message,
            error_code=error.code.value,
            status_code=error.status_code,
            api_error_code=error.details.get("api_error_code"),
            api_error_message=error.details.get("api_error_message"),
            event_type="weather_api_error",
        )


def _pad(forecasts: list[T], count: int, fallback: Callable[[], T], kind: str) -> list[T]:
    """Fill a short forecast list up to ``count`` entries with invalid results."""
    missing = count - len(forecasts)
    if missing > 0:
        log_with_context(
            logger,
            "warning",
            "WeatherAPI returned fewer forecast entries than requested",
            kind=kind,
            requested=count,
            returned=len(forecasts),
            event_type="weather_forecast_short",
        )
        forecasts.extend(fallback() for _ in range(missing))
    return forecasts

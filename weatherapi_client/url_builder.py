"""Request URL construction for the WeatherAPI.com endpoints.

Parameters are interpolated verbatim without percent-encoding; location
queries containing reserved characters (``&``, ``#``, ``?``) are passed
through unchanged and may be misread by the server.
"""

import math

API_HOST = "api.weatherapi.com/v1"


def _base_url(use_https: bool, endpoint: str) -> str:
    scheme = "https" if use_https else "http"
    return f"{scheme}://{API_HOST}/{endpoint}"


def _aqi_flag(include_air_quality: bool) -> str:
    return "yes" if include_air_quality else "no"


def build_current_weather_url(api_key: str, use_https: bool, query: str, include_air_quality: bool) -> str:
    """Build the current conditions URL (``current.json``)."""
    return f"{_base_url(use_https, 'current.json')}?key={api_key}&q={query}&aqi={_aqi_flag(include_air_quality)}"


def build_forecast_url(api_key: str, use_https: bool, query: str, days: int, include_air_quality: bool) -> str:
    """Build the multi-day forecast URL (``forecast.json``)."""
    return (
        f"{_base_url(use_https, 'forecast.json')}"
        f"?key={api_key}&q={query}&days={days}&aqi={_aqi_flag(include_air_quality)}"
    )


def build_ip_lookup_url(api_key: str, use_https: bool) -> str:
    """Build the IP geolocation URL (``ip.json``); the server resolves the caller's IP."""
    return f"{_base_url(use_https, 'ip.json')}?key={api_key}&q=auto:ip"


def days_for_hours(hours: int) -> int:
    """Number of forecast days needed to cover ``hours`` hours."""
    return math.ceil(hours / 24)

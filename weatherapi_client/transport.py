"""Default httpx-backed transport and JSON decoder."""

import json
from typing import Any

import httpx

from weatherapi_client.exceptions import WeatherAPIException, WeatherTransportException
from weatherapi_client.logging_config import get_logger, log_with_context, redact_sensitive_data

DEFAULT_TIMEOUT_SECONDS = 10.0

logger = get_logger(__name__)


def decode_json(text: str) -> Any:
    """Parse response text with the standard library JSON parser."""
    return json.loads(text)


def _api_error_details(response: httpx.Response) -> dict[str, Any]:
    """Extract WeatherAPI's {"error": {"code", "message"}} envelope, if present."""
    details: dict[str, Any] = {"api_response": response.text}
    try:
        payload = response.json()
    except ValueError:
        return details

    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        details["api_error_code"] = error.get("code")
        details["api_error_message"] = error.get("message")
    return details


class HttpxTransport:
    """HTTP transport built on httpx.AsyncClient.

    A shared client may be injected (e.g. one owned by a host application);
    otherwise a fresh client is opened for every request.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: float | httpx.Timeout = DEFAULT_TIMEOUT_SECONDS,
    ):
        self._client = client
        self._timeout = timeout

    async def get_text(self, url: str) -> str:
        """Issue a GET request and return the response body.

        Raises:
            WeatherAPIException: On non-2xx responses
            WeatherTransportException: On network errors and timeouts
        """
        if self._client is not None:
            return await self._get(self._client, url)

        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            return await self._get(client, url)

    async def _get(self, client: httpx.AsyncClient, url: str) -> str:
        redacted_url = redact_sensitive_data(url)
        log_with_context(
            logger,
            "debug",
            "HTTP Request",
            method="GET",
            url=redacted_url,
            event_type="http_request",
        )

        try:
            response = await client.get(url, timeout=self._timeout)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise WeatherAPIException(
                f"WeatherAPI request failed (HTTP {e.response.status_code})",
                status_code=e.response.status_code,
                details=_api_error_details(e.response),
            ) from e
        except httpx.TimeoutException as e:
            raise WeatherTransportException(
                f"WeatherAPI request timed out: {e}",
                details={"error_type": "timeout"},
            ) from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise WeatherTransportException(
                f"Failed to reach WeatherAPI: {e}",
                details={"error_type": "network_error"},
            ) from e

        log_with_context(
            logger,
            "debug",
            "HTTP Response",
            status_code=response.status_code,
            url=redacted_url,
            event_type="http_response",
        )
        return response.text

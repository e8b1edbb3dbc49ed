"""Protocol definitions for dependency injection."""

from typing import Any, Protocol


class HttpTransport(Protocol):
    """Protocol for the HTTP transport used by WeatherAPIClient.

    Implementations perform a single GET request and return the body text.
    """

    async def get_text(self, url: str) -> str:
        """Issue a GET request.

        Args:
            url: Fully formed request URL

        Returns:
            Response body as text

        Raises:
            WeatherAPIException: If the server answers with a non-success status
            WeatherTransportException: If no response could be obtained
        """
        ...


class JsonDecoder(Protocol):
    """Protocol for turning response text into a generic JSON tree."""

    def __call__(self, text: str) -> Any:
        """Parse JSON text.

        Raises:
            ValueError: If the text is not valid JSON
        """
        ...

"""Base model shared by all client result types."""

from typing import Self

from pydantic import BaseModel, ConfigDict


class WeatherResult(BaseModel):
    """Immutable result of a WeatherAPI request.

    ``valid`` is the first thing callers must check: it is True only when the
    result was decoded from a well-formed response. Every other field keeps
    its zero value on an invalid result.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool = False

    @classmethod
    def invalid(cls) -> Self:
        """Create the zero-valued result that signals a failed request."""
        return cls(valid=False)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return celsius * 9 / 5 + 32

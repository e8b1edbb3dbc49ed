import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """WeatherAPI client settings with validation.

    Values are read from WEATHERAPI_* environment variables or a local .env file.
    The API key is required and is never logged.
    """

    api_key: str = Field(min_length=1, description="WeatherAPI.com API key")
    use_https: bool = Field(default=True, description="Use https instead of http")
    timeout_seconds: float = Field(default=10.0, gt=0, description="HTTP request timeout in seconds")
    log_level: str = Field(default="INFO", description="Log level for setup_logging_from_settings()")

    model_config = SettingsConfigDict(
        env_prefix="WEATHERAPI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_key", mode="after")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Ensure api_key is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_key must not be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL (got {v!r})")
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance.

    Creates the instance lazily so the environment is only read once.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance

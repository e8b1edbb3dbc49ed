"""Structured logging configuration for the WeatherAPI client.

The library itself never configures logging on import; host applications
call setup_logging() or setup_logging_from_settings() once. JSON structured
logs are optionally written to a rotating file (10MB rotation, 5 backups)
alongside human-readable console logs.
"""

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING, Any

from pythonjsonlogger import jsonlogger

if TYPE_CHECKING:
    from weatherapi_client.config import Settings

# Sensitive parameters to redact from URLs
SENSITIVE_PARAMS = [
    "key",
    "api_key",
    "token",
    "secret",
]


def setup_logging(log_level: str = "INFO", log_file: Path | str | None = None) -> logging.Logger:
    """Configure structured logging with console output and optional JSON file output.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Path of the JSON log file; no file handler when omitted

    Returns:
        Configured root logger instance
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Remove any existing handlers
    root_logger.handlers.clear()

    if log_file is not None:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        # JSON file handler with rotation (10MB, 5 backups)
        json_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding="utf-8",
        )
        json_formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(filename)s %(lineno)d",
            timestamp=True,
        )
        json_handler.setFormatter(json_formatter)
        json_handler.setLevel(logging.DEBUG)  # Capture all levels to file
        root_logger.addHandler(json_handler)

    # Console handler with human-readable format
    console_handler = logging.StreamHandler(sys.stdout)
    console_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(console_formatter)
    console_handler.setLevel(getattr(logging, log_level.upper()))
    root_logger.addHandler(console_handler)

    # httpx logs full request URLs, including the API key
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger


def setup_logging_from_settings(settings: "Settings", log_file: Path | str | None = None) -> logging.Logger:
    """Configure logging at the level named by ``settings.log_level``.

    Args:
        settings: Settings instance (WEATHERAPI_LOG_LEVEL)
        log_file: Path of the JSON log file; no file handler when omitted

    Returns:
        Configured root logger instance
    """
    return setup_logging(settings.log_level, log_file=log_file)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with structured logging support.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance configured for structured logging
    """
    return logging.getLogger(name)


def log_with_context(
    logger: logging.Logger,
    level: str,
    message: str,
    **extra_fields: Any,
) -> None:
    """Log a message with additional structured context fields.

    Args:
        logger: Logger instance
        level: Log level (debug, info, warning, error, critical)
        message: Log message
        **extra_fields: Additional fields to include in JSON log (e.g., url, status_code)
    """
    log_method = getattr(logger, level.lower())
    log_method(message, extra=extra_fields)


def redact_sensitive_data(url: str) -> str:
    """Redact sensitive query parameters from URL."""
    redacted = url
    for param in SENSITIVE_PARAMS:
        pattern = rf"([?&]){param}=([^&\s\"]+)"
        redacted = re.sub(pattern, rf"\g<1>{param}=***REDACTED***", redacted)
    return redacted

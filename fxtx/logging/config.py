"""Logging configuration using Pydantic settings."""

from enum import StrEnum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(StrEnum):
    """Valid log levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(StrEnum):
    """Valid log formats."""

    JSON = "json"
    HUMAN = "human"


class LoggingConfig(BaseSettings):
    """Logging configuration loaded from environment variables.

    Attributes:
        log_level: Minimum log level to output.
        log_format: Output format - json for production, human for debugging.
        service_name: Service identifier for log aggregation.
        include_timestamp: Whether to include timestamp.
        include_location: Whether to include file/function/line info.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default=LogLevel.INFO)
    log_format: LogFormat = Field(default=LogFormat.JSON)
    service_name: str = Field(default="fxtx")
    include_timestamp: bool = Field(default=True)
    include_location: bool = Field(default=False)

    @classmethod
    def for_debug(cls) -> "LoggingConfig":
        """Return the configuration used when debug mode is requested."""
        return cls(
            log_level=LogLevel.DEBUG,
            log_format=LogFormat.HUMAN,
            include_location=True,
        )


@lru_cache
def get_logging_config() -> LoggingConfig:
    """Get cached logging configuration instance."""
    return LoggingConfig()

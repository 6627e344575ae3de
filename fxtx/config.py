"""Process settings using Pydantic BaseSettings.

Settings are read from environment variables and can be overridden by
command-line flags (see fxtx.main).
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from fxtx.transport.sender import split_destination


class FxtxSettings(BaseSettings):
    """Settings loaded from environment variables.

    Attributes:
        config: Path to the YAML generator configuration file.
        debug: Enable debug logging (human-readable, DEBUG level).
        dest: Destination host:port for generated messages.
        timeout: TCP connect and write timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
        str_strip_whitespace=True,
    )

    config: str = Field(default="./cfg/example.yml", min_length=1)
    debug: bool = Field(default=False)
    dest: str = Field(default="127.0.0.1:30000", min_length=1)
    timeout: int = Field(default=10, ge=0)

    @field_validator("dest")
    @classmethod
    def validate_dest(cls, value: str) -> str:
        """Validate destination is a host:port pair."""
        split_destination(value)
        return value


@lru_cache
def get_settings() -> FxtxSettings:
    """Get cached settings instance.

    Returns:
        Cached FxtxSettings instance.
    """
    return FxtxSettings()

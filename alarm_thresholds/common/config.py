"""
Settings using pydantic-settings.

Ambient configuration for the resolver process. Threshold keys are not
settings fields: they are read through the resolver so that parse failures
stay attributed to the exact key.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlarmSettings(BaseSettings):
    """Settings loaded from ``ALARMS_``-prefixed environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ALARMS_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(default="INFO", description="Logging level")
    env_file: Optional[str] = Field(
        default=None,
        description="Optional .env file consulted for threshold keys",
    )


@lru_cache
def get_settings() -> AlarmSettings:
    """Get cached settings instance."""
    return AlarmSettings()

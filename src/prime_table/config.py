"""Configuration for building and querying the primality table.

Values come from keyword arguments first, then ``PRIME_TABLE_*``
environment variables, then the defaults below.
"""

from __future__ import annotations

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_MAX_NUMBER = 101
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class SieveConfig(BaseSettings):
    """Configuration for the primality table."""

    # Table bound, fixed before the table is built
    max_number: int = Field(default=DEFAULT_MAX_NUMBER, ge=0)

    # Logging
    log_level: str = "WARNING"
    json_logs: bool = False

    # env prefix PRIME_TABLE_*
    model_config = SettingsConfigDict(env_prefix="PRIME_TABLE_", extra="ignore")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {value!r}")
        return level

    @classmethod
    def from_env(cls) -> SieveConfig:
        """Load the config from the environment.

        Raises:
            pydantic.ValidationError: If a variable has an invalid value
                (a subclass of ValueError).
        """
        return cls()

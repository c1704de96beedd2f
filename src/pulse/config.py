"""
Configuration management for the pulse client.

Supports configuration via environment variables and .env files.
"""

from datetime import timedelta
from typing import Optional, Union

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Mock node the service is reachable at by default
DEFAULT_URL = "https://mock-node-wgqbnxruha-as.a.run.app"

DEFAULT_POLL_INTERVAL_SECONDS = 3.0


class PulseConfig(BaseSettings):
    """
    Configuration settings for a pulse client.

    All settings can be configured via environment variables with the PULSE_ prefix.
    Instances are immutable once built.
    """

    model_config = SettingsConfigDict(
        env_prefix="PULSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Service settings
    base_url: str = Field(
        default=DEFAULT_URL,
        min_length=1,
        description="Base URL for broadcasting assets and checking their status"
    )
    request_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout applied to every HTTP request"
    )

    # Monitoring settings
    poll_interval_seconds: float = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        gt=0,
        description="Time to wait between status checks while a transaction is pending"
    )
    monitor_timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0,
        description="Deadline for monitoring a single transaction (unbounded if unset)"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format"
    )

    @classmethod
    def from_options(
        cls,
        url: Optional[str] = None,
        poll_interval: Optional[Union[float, timedelta]] = None,
        **overrides,
    ) -> "PulseConfig":
        """
        Build a configuration from explicit options.

        Unset (empty or zero) options fall back to their defaults. Neither
        PULSE_* environment variables nor a .env file are consulted.

        Args:
            url: Base URL of the service
            poll_interval: Seconds, or a timedelta, between status checks
            **overrides: Any other PulseConfig field

        Returns:
            New configuration
        """
        values = {
            name: field.get_default(call_default_factory=True)
            for name, field in cls.model_fields.items()
        }
        values.update(overrides)
        if url:
            values["base_url"] = url
        if isinstance(poll_interval, timedelta):
            poll_interval = poll_interval.total_seconds()
        if poll_interval:
            values["poll_interval_seconds"] = poll_interval
        # Every field is passed explicitly, so env sources have nothing left to fill
        return cls(_env_file=None, **values)

    @property
    def poll_interval(self) -> timedelta:
        return timedelta(seconds=self.poll_interval_seconds)


# Global config instance
_config: Optional[PulseConfig] = None


def get_config() -> PulseConfig:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = PulseConfig.from_options()
    return _config


def set_config(config: PulseConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config

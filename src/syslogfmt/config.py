"""Configuration via pydantic-settings — 12-factor app style."""
from __future__ import annotations

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .priority import Facility
from .timestamps import TimestampPrecision


class Settings(BaseSettings):
    """syslogfmt defaults — loaded from env vars / .env file."""

    protocol: str = Field(default="rfc5424", description="Formatter variant (default|unix|rfc3164|rfc5424)")
    facility: str = Field(default="daemon", description="Syslog facility name")
    hostname: str = Field(default="", description="HOSTNAME field; empty means the local host name")
    app_name: str = Field(default="", description="APP-NAME field; empty means the program name")
    tag: str = Field(default="", description="TAG (3164) or MSGID (5424)")
    timestamp_utc: Optional[bool] = Field(default=None, description="Render timestamps in UTC (unset: variant default)")
    timestamp_level: Optional[TimestampPrecision] = Field(
        default=None, description="Fractional seconds: none|milli|micro (unset: variant default)"
    )
    log_level: str = Field(default="WARNING", description="Log level for the syslogfmt loggers")

    @field_validator("protocol")
    @classmethod
    def _lower_protocol(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("protocol must not be empty")
        return value

    @field_validator("facility")
    @classmethod
    def _known_facility(cls, value: str) -> str:
        return Facility.parse(value).name.lower()

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()

    class Config:
        env_prefix = "SYSLOGFMT_"
        env_file = ".env"


settings = Settings()
